"""
SOLE RESPONSIBILITY: Resolves the diagnostic settings of the filter.
Rendering itself is fixed; only debug logging can be switched on and redirected.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..logger import DEFAULT_LOG_DIR

DEBUG_ENV = "CLAUDE_STREAM_FILTER_DEBUG"
LOG_DIR_ENV = "CLAUDE_STREAM_FILTER_LOG_DIR"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class FilterConfig:
    """Diagnostic configuration."""

    debug: bool = False
    log_dir: Path = field(default_factory=lambda: DEFAULT_LOG_DIR)

    @classmethod
    def load(cls, debug: Optional[bool] = None) -> "FilterConfig":
        """
        Priority: CLI flag > environment variable > default.
        Passing debug=None means the flag was not given.
        """
        config = cls()

        if val := os.environ.get(DEBUG_ENV):
            config.debug = val.strip().lower() in _TRUTHY
        if val := os.environ.get(LOG_DIR_ENV):
            config.log_dir = Path(val).expanduser()

        if debug is not None:
            config.debug = debug

        return config
