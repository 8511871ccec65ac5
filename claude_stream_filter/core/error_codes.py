"""
SOLE RESPONSIBILITY: Centralized error codes and categories for claude-stream-filter.
Every per-line fault is classified here, counted, and then recovered by skipping the line.
"""

from enum import Enum
from typing import Dict


class ErrorCategory(Enum):
    """High-level error classification."""

    DECODE = "decode"  # Line read fine but is not a usable record
    SOURCE = "source"  # Could not obtain the line at all
    SINK = "sink"  # Could not write the formatted line


class ErrorCode(Enum):
    """Trackable error identifiers for consistent error handling."""

    # Decode Errors (1xxx)
    DECODE_INVALID_JSON = 1001
    DECODE_SHAPE_MISMATCH = 1002

    # Source Errors (2xxx)
    SOURCE_READ_FAILED = 2001
    SOURCE_INVALID_UTF8 = 2002

    # Sink Errors (3xxx)
    SINK_WRITE_FAILED = 3001

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORY_BY_PREFIX[self.value // 1000]


_CATEGORY_BY_PREFIX = {
    1: ErrorCategory.DECODE,
    2: ErrorCategory.SOURCE,
    3: ErrorCategory.SINK,
}

PREVIEW_LENGTH = 60


class DecodeError(Exception):
    """Raised when a line cannot be decoded into a StreamMessage."""

    def __init__(self, code: ErrorCode, line: str, detail: str = ""):
        self.code = code
        self.category = code.category
        self.preview = line[:PREVIEW_LENGTH]
        self.detail = detail
        message = f"{code.name}: {detail}" if detail else code.name
        super().__init__(message)


class ErrorMetrics:
    """Counters for skipped lines."""

    def __init__(self):
        self.error_counts: Dict[ErrorCode, int] = {}
        self.category_counts: Dict[ErrorCategory, int] = {}

    def record_error(self, code: ErrorCode) -> None:
        """Record an error occurrence."""
        category = code.category
        self.error_counts[code] = self.error_counts.get(code, 0) + 1
        self.category_counts[category] = self.category_counts.get(category, 0) + 1

    def count(self, code: ErrorCode) -> int:
        return self.error_counts.get(code, 0)

    def total(self) -> int:
        return sum(self.error_counts.values())
