"""TCP connect latency probe."""

__version__ = "0.1.0"
