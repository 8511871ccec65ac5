"""
SOLE RESPONSIBILITY: Turns one raw line of stream-json into a StreamMessage,
or raises DecodeError. Pure: no I/O, no logging, no shared state.
"""

from typing import Union

from pydantic import ValidationError
from pydantic_core import from_json

from .error_codes import DecodeError, ErrorCode
from .models import StreamMessage


def decode(line: Union[str, bytes]) -> StreamMessage:
    """
    Parse a single line into a StreamMessage.
    Syntax errors map to DECODE_INVALID_JSON, anything that parses but does not
    fit the envelope maps to DECODE_SHAPE_MISMATCH. Unknown `type` values are valid.
    """
    text = line.decode("utf-8", errors="replace") if isinstance(line, bytes) else line

    # Strict JSON: NaN / Infinity literals are syntax errors
    try:
        data = from_json(line, allow_inf_nan=False)
    except ValueError as e:
        raise DecodeError(ErrorCode.DECODE_INVALID_JSON, text, str(e)) from e

    try:
        return StreamMessage.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0] if errors else {}
        detail = first.get("msg", str(e))

        location = ".".join(str(part) for part in first.get("loc", ()))
        if location:
            detail = f"{location}: {detail}"
        raise DecodeError(ErrorCode.DECODE_SHAPE_MISMATCH, text, detail) from e
