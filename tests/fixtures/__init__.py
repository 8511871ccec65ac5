"""
Test fixtures and utilities for claude-stream-filter testing.
"""

from .sample_data import SESSION_OUTPUT, SampleDataGenerator

__all__ = [
    "SampleDataGenerator",
    "SESSION_OUTPUT",
]
