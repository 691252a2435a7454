"""Thread-safe in-process metrics with periodic aggregation to a log file."""

__version__ = "0.1.0"