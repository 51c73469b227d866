"""String padding and currency formatting."""

from __future__ import annotations


def _padding(value: str, length: int, char: str) -> str | None:
    """Return the padding to add, or None when the value should be dropped."""
    if length <= 0 or char == "" or value == "":
        return None
    if len(value) >= length:
        return ""
    return char * (length - len(value))


def left_pad_with_char(value: str, length: int, char: str) -> str:
    """Prefix ``char`` until ``value`` has ``length`` characters.

    Returns an empty string when ``length`` is not positive, ``char`` is empty
    or ``value`` is empty; a value already long enough is returned unchanged.
    """
    padding = _padding(value, length, char)
    return "" if padding is None else padding + value


def right_pad_with_char(value: str, length: int, char: str) -> str:
    """Append ``char`` until ``value`` has ``length`` characters.

    Returns an empty string when ``length`` is not positive, ``char`` is empty
    or ``value`` is empty; a value already long enough is returned unchanged.
    """
    padding = _padding(value, length, char)
    return "" if padding is None else value + padding


def format_currency(amount: float, symbol: str) -> str:
    """Return the symbol, a space and the amount with two decimals."""
    return f"{symbol} {amount:.2f}"