"""
SOLE RESPONSIBILITY: Pumps lines from a byte source through the formatter into a byte sink.
One line at a time, in order. Per-line faults are counted and skipped, never raised.
"""

import logging
from dataclasses import dataclass, field
from typing import BinaryIO, Optional

from .decoder import decode
from .error_codes import DecodeError, ErrorCode, ErrorMetrics
from .formatter import format_message

logger = logging.getLogger(__name__)


@dataclass
class FilterStats:
    """Outcome of one run."""

    lines_read: int = 0
    lines_emitted: int = 0
    errors: ErrorMetrics = field(default_factory=ErrorMetrics)

    @property
    def lines_skipped(self) -> int:
        return self.errors.total()


def _read_line(source: BinaryIO, stats: FilterStats) -> Optional[bytes]:
    """Next raw line, b"" at end of input, or None when the read itself failed."""
    try:
        return source.readline()
    except OSError as e:
        stats.errors.record_error(ErrorCode.SOURCE_READ_FAILED)
        logger.debug(f"{ErrorCode.SOURCE_READ_FAILED.name}: {e}")
        return None


def _write_line(sink: BinaryIO, output: str, stats: FilterStats) -> None:
    try:
        sink.write(output.encode("utf-8") + b"\n")
        sink.flush()
    except OSError as e:
        stats.errors.record_error(ErrorCode.SINK_WRITE_FAILED)
        logger.debug(f"{ErrorCode.SINK_WRITE_FAILED.name}: {e}")
        return
    stats.lines_emitted += 1


def run_filter(source: BinaryIO, sink: BinaryIO) -> FilterStats:
    """
    Read `source` until end of input, writing one formatted line per record to `sink`.
    Lines that cannot be read, are not UTF-8, or do not decode are dropped silently.
    """
    stats = FilterStats()

    while True:
        raw = _read_line(source, stats)
        if raw is None:
            continue
        if not raw:
            break
        stats.lines_read += 1

        try:
            line = raw.rstrip(b"\r\n").decode("utf-8")
        except UnicodeDecodeError as e:
            stats.errors.record_error(ErrorCode.SOURCE_INVALID_UTF8)
            logger.debug(f"Line {stats.lines_read}: {ErrorCode.SOURCE_INVALID_UTF8.name}: {e}")
            continue

        try:
            msg = decode(line)
        except DecodeError as e:
            stats.errors.record_error(e.code)
            logger.debug(f"Line {stats.lines_read}: {e} [{e.preview!r}]")
            continue

        output = format_message(msg)
        if output is not None:
            _write_line(sink, output, stats)

    logger.info(
        f"Read {stats.lines_read} lines, emitted {stats.lines_emitted}, skipped {stats.lines_skipped}"
    )
    return stats
