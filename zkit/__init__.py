"""Thread-safe collections, functional options and terminal styling helpers."""

__version__ = "0.1.0"