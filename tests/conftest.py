"""
Global pytest configuration and fixtures for claude-stream-filter testing.
"""

import io
import logging
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from claude_stream_filter.cli.config import DEBUG_ENV, LOG_DIR_ENV
from claude_stream_filter.logger import LOGGER_NAME
from tests.fixtures import SampleDataGenerator


class FlushTrackingBuffer(io.BytesIO):
    """BytesIO that records how many times it was flushed."""

    def __init__(self):
        super().__init__()
        self.flush_count = 0

    def flush(self):
        self.flush_count += 1
        super().flush()


class BrokenSink(io.BytesIO):
    """Sink whose reader went away, like stdout piped into `head`."""

    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")


class FlakySource:
    """Byte source that fails on the listed read attempts (0-based) and serves lines otherwise."""

    def __init__(self, lines, fail_on):
        self._lines = list(lines)
        self._fail_on = set(fail_on)
        self._attempt = 0

    def readline(self):
        attempt = self._attempt
        self._attempt += 1
        if attempt in self._fail_on:
            raise OSError(5, "Input/output error")
        if not self._lines:
            return b""
        return self._lines.pop(0)


@pytest.fixture(scope="function")
def sample():
    """Stream-json record builders."""
    return SampleDataGenerator


@pytest.fixture(scope="function")
def make_source():
    """Build a byte source from str/bytes lines, newline-terminated."""

    def _make(lines):
        data = b"".join((line.encode("utf-8") if isinstance(line, str) else line) + b"\n" for line in lines)
        return io.BytesIO(data)

    return _make


@pytest.fixture(scope="function")
def sink():
    """Byte sink that counts flushes."""
    return FlushTrackingBuffer()


@pytest.fixture(scope="function", autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from the user's environment and log directory."""
    monkeypatch.delenv(DEBUG_ENV, raising=False)
    monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path / "logs"))
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(scope="function")
def broken_sink():
    return BrokenSink()


@pytest.fixture(scope="function")
def flaky_source():
    """Factory for sources whose reads fail on chosen attempts."""

    def _make(lines, fail_on):
        return FlakySource([line.encode("utf-8") + b"\n" for line in lines], fail_on)

    return _make
