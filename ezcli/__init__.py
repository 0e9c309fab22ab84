"""Declare command line options and run them against an argument list."""

__version__ = "0.1.0"

__all__ = ["cli", "example", "options", "printing", "runner"]