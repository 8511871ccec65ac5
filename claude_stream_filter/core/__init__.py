"""
Core line pipeline for claude-stream-filter.
Decoder and formatter are pure; the runner owns the only I/O.
"""

from .decoder import decode
from .error_codes import DecodeError, ErrorCategory, ErrorCode, ErrorMetrics
from .formatter import (
    TOOL_RENDERERS,
    format_content_block,
    format_message,
    format_tool_use,
    get_str_field,
    is_blank,
    process_line,
    truncate,
)
from .models import AssistantMessage, OtherBlock, StreamMessage, TextBlock, ToolUseBlock
from .runner import FilterStats, run_filter

__all__ = [
    # Models
    "StreamMessage",
    "AssistantMessage",
    "TextBlock",
    "ToolUseBlock",
    "OtherBlock",
    # Decoding
    "decode",
    "DecodeError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorMetrics",
    # Formatting
    "TOOL_RENDERERS",
    "format_content_block",
    "format_message",
    "format_tool_use",
    "get_str_field",
    "is_blank",
    "process_line",
    "truncate",
    # Streaming
    "FilterStats",
    "run_filter",
]
