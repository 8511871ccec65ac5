"""Claude Stream Filter - compact, human-readable summaries of Claude CLI stream-json output.

Reads one JSON record per line and prints one short annotated line per record.
"""

# Package metadata for PyPI distribution
__version__ = "0.1.0"
