"""Small helpers for collections of strings."""

from __future__ import annotations

from collections.abc import Iterable


def contains_string(strings: Iterable[str], value: str) -> bool:
    """Return True when ``value`` equals one of ``strings``."""
    return any(item == value for item in strings)