"""Helpers for conversions, padding, dates, hashing, tokens, files, archives and downloads."""

__version__ = "0.1.0"