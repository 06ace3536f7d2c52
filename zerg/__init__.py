"""Utilities for strings, numbers, time, shell commands and small data structures."""

__version__ = "0.1.0"