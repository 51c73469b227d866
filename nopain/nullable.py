"""Conversions between strings and values that may be absent."""

from __future__ import annotations

from datetime import datetime

from nopain.conversion import (
    float32_to_string,
    float64_to_string,
    string_to_float32,
    string_to_float64,
    string_to_int,
    string_to_int32,
    string_to_int64,
)


def _parse_or_none(parse, text: str):
    if text == "":
        return None
    try:
        return parse(text)
    except ValueError:
        return None


def string_to_int_or_none(text: str) -> int | None:
    """Parse a 64-bit integer, or return None for empty or invalid text."""
    return _parse_or_none(string_to_int, text)


def string_to_int32_or_none(text: str) -> int | None:
    """Parse a 32-bit integer, or return None for empty or invalid text."""
    return _parse_or_none(string_to_int32, text)


def string_to_int64_or_none(text: str) -> int | None:
    """Parse a 64-bit integer, or return None for empty or invalid text."""
    return _parse_or_none(string_to_int64, text)


def string_to_float32_or_none(text: str) -> float | None:
    """Parse a single-precision number, or return None for empty or invalid text."""
    return _parse_or_none(string_to_float32, text)


def string_to_float64_or_none(text: str) -> float | None:
    """Parse a double-precision number, or return None for empty or invalid text."""
    return _parse_or_none(string_to_float64, text)


def string_or_none(text: str) -> str | None:
    """Return the text, or None when it is empty."""
    return text or None


def int_or_none_to_string(number: int | None) -> str:
    """Decimal text of an integer, or an empty string for None."""
    return "" if number is None else str(number)


def float32_or_none_to_string(number: float | None) -> str:
    """Shortest single-precision text, or an empty string for None."""
    return "" if number is None else float32_to_string(number)


def float64_or_none_to_string(number: float | None) -> str:
    """Shortest double-precision text, or an empty string for None."""
    return "" if number is None else float64_to_string(number)


def optional_to_string(value: str | None) -> str:
    """Return the text, or an empty string for None."""
    return "" if value is None else value


def format_time_optional(moment: datetime | None) -> str | None:
    """Format as RFC 3339 without fractional seconds, or return None.

    A naive datetime is taken to be in local time.
    """
    if moment is None:
        return None
    aware = moment if moment.tzinfo is not None else moment.astimezone()
    offset = aware.utcoffset()
    stamp = (
        f"{aware.year:04d}-{aware.month:02d}-{aware.day:02d}"
        f"T{aware.hour:02d}:{aware.minute:02d}:{aware.second:02d}"
    )
    total_minutes = int(offset.total_seconds()) // 60 if offset else 0
    if total_minutes == 0:
        return stamp + "Z"
    sign = "+" if total_minutes > 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{stamp}{sign}{hours:02d}:{minutes:02d}"