"""Conversions between strings, booleans and fixed-width numbers."""

from __future__ import annotations

import dataclasses
import math
import re
import struct
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX_FLOAT_PATTERN = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


# ---------------------------------------------------------------- helpers


def _to_float32(number: float) -> float:
    """Round ``number`` to the nearest single-precision value."""
    return struct.unpack("<f", struct.pack("<f", number))[0]


def _int_bounds(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _special_float_text(number: float) -> str | None:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    return None


def _shortest_float32_digits(number: float) -> str:
    single = _to_float32(number)
    for precision in range(1, 10):
        text = f"{single:.{precision}g}"
        if _to_float32(float(text)) == single:
            return text
    return repr(single)


def _plain_decimal(text: str) -> str:
    return format(Decimal(text).normalize(), "f")


def _general_float(number: float) -> str:
    """Shortest representation in the style of ``%v``/``%g``."""
    special = _special_float_text(number)
    if special is not None:
        return special
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(number)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent
    exp = point - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "+" if exp >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        body = "0." + "0" * (-point) + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + "." + digits[point:]
    return prefix + body


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return bool_to_string(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _general_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in value) + "]"
    if isinstance(value, Mapping):
        items = list(value.items())
        try:
            items.sort(key=lambda pair: pair[0])
        except TypeError:
            pass
        body = " ".join(f"{_format_value(k)}:{_format_value(v)}" for k, v in items)
        return f"map[{body}]"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        body = " ".join(
            _format_value(getattr(value, field.name)) for field in dataclasses.fields(value)
        )
        return "{" + body + "}"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


def _conversion_error(kind: str, text: str, reason: str) -> ValueError:
    return ValueError(
        f"error converting string to {kind} '{text}': parsing \"{text}\": {reason}"
    )


def _parse_int(text: str, bits: int, kind: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise _conversion_error(kind, text, "invalid syntax")
    value = int(text)
    low, high = _int_bounds(bits)
    if not low <= value <= high:
        raise _conversion_error(kind, text, "value out of range")
    return value


def _parse_float(text: str, kind: str) -> float:
    if _SPECIAL_FLOAT_PATTERN.fullmatch(text):
        return float(text)
    if _HEX_FLOAT_PATTERN.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            raise _conversion_error(kind, text, "value out of range") from None
    if _DECIMAL_FLOAT_PATTERN.fullmatch(text):
        value = float(text)
        if math.isinf(value):
            raise _conversion_error(kind, text, "value out of range")
        return value
    raise _conversion_error(kind, text, "invalid syntax")


def _truncate(number: float, bits: int) -> int:
    value = int(number)
    low, high = _int_bounds(bits)
    if not low <= value <= high:
        raise OverflowError(f"{number} does not fit in a {bits}-bit integer")
    return value


# ---------------------------------------------------------------- any / bool


def any_to_string(value: Any) -> str:
    """Render any value the way the default ``%v`` verb shows it."""
    return _format_value(value)


def string_to_bool(text: str) -> bool:
    """Parse 1, t, T, TRUE, true, True and 0, f, F, FALSE, false, False."""
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f'parsing "{text}": invalid syntax')


def bool_to_string(value: bool) -> str:
    """Return ``"true"`` or ``"false"`` for the truth of ``value``."""
    return str(bool(value)).lower()


# ---------------------------------------------------------------- floats


def float32_to_string(number: float) -> str:
    """Shortest decimal text, without exponent, of ``number`` as a float32."""
    special = _special_float_text(number)
    if special is not None:
        return special
    return _plain_decimal(_shortest_float32_digits(number))


def float64_to_string(number: float) -> str:
    """Shortest decimal text, without exponent, of ``number``."""
    special = _special_float_text(number)
    if special is not None:
        return special
    return _plain_decimal(repr(float(number)))


def float_to_int(number: float) -> int:
    """Truncate toward zero into a 64-bit integer."""
    return _truncate(number, 64)


def float_to_int32(number: float) -> int:
    """Truncate toward zero into a 32-bit integer."""
    return _truncate(number, 32)


def float_to_int64(number: float) -> int:
    """Truncate toward zero into a 64-bit integer."""
    return _truncate(number, 64)


# ---------------------------------------------------------------- integers


def int_to_string(number: int) -> str:
    """Decimal text of an integer."""
    return format(number, "d")


def int_to_float32(number: int) -> float:
    """The nearest single-precision value to ``number``."""
    return _to_float32(float(number))


def int_to_float64(number: int) -> float:
    """The nearest double-precision value to ``number``."""
    return float(number)


# ---------------------------------------------------------------- strings


def string_to_int(text: str) -> int:
    """Parse a signed decimal 64-bit integer; raise ValueError on failure."""
    return _parse_int(text, 64, "int")


def string_to_int8(text: str) -> int:
    """Parse a signed decimal 8-bit integer; raise ValueError on failure."""
    return _parse_int(text, 8, "int8")


def string_to_int32(text: str) -> int:
    """Parse a signed decimal 32-bit integer; raise ValueError on failure."""
    return _parse_int(text, 32, "int32")


def string_to_int64(text: str) -> int:
    """Parse a signed decimal 64-bit integer; raise ValueError on failure."""
    return _parse_int(text, 64, "int64")


def string_to_float32(text: str) -> float:
    """Parse a number rounded to single precision; raise ValueError on failure."""
    value = _parse_float(text, "float32")
    if math.isinf(value) or math.isnan(value):
        return value
    try:
        return _to_float32(value)
    except OverflowError:
        raise _conversion_error("float32", text, "value out of range") from None


def string_to_float64(text: str) -> float:
    """Parse a double-precision number; raise ValueError on failure."""
    return _parse_float(text, "float64")