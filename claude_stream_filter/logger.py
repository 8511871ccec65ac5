"""
Diagnostic logging for claude-stream-filter.
Stdout carries the formatted stream, so diagnostics only ever go to a rotating log file.
"""

import logging
import os
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterator, Optional

LOGGER_NAME = "claude_stream_filter"
DEFAULT_LOG_DIR = Path.home() / ".claude-stream-filter" / "logs"


def get_log_directory(log_dir: Optional[Path] = None) -> Path:
    """Get or create the log directory."""
    directory = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _remove_handlers(logger: logging.Logger) -> None:
    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        handler.flush()
        handler.close()
        logger.removeHandler(handler)


def setup_logger(debug: bool = False, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Set up the package logger.

    With debug off the logger gets no handlers and stays at WARNING, so per-line
    DEBUG diagnostics are dropped. With debug on they go to filter.log
    (5MB max, keep 3 backups) in the log directory.
    """
    logger = logging.getLogger(LOGGER_NAME)
    _remove_handlers(logger)

    if not debug:
        logger.setLevel(logging.WARNING)
        logger.propagate = True
        return logger

    logger.setLevel(logging.DEBUG)
    handler = RotatingFileHandler(
        get_log_directory(log_dir) / "filter.log",
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    # Keep diagnostics out of the root logger's handlers
    logger.propagate = False
    return logger


@contextmanager
def log_lifecycle(source_name: str) -> Iterator[None]:
    """Log start and end of one filter run."""
    logger = logging.getLogger(LOGGER_NAME)

    started = datetime.now(timezone.utc)
    logger.info(f"Filtering {source_name} (PID {os.getpid()}, Python {sys.version.split()[0]})")
    try:
        yield
    finally:
        elapsed = (datetime.now(timezone.utc) - started).total_seconds()
        logger.info(f"Finished {source_name} in {elapsed:.2f}s")
