from dataclasses import dataclass

import pytest

from nopain.conversion import (
    any_to_string,
    bool_to_string,
    float32_to_string,
    float64_to_string,
    float_to_int,
    float_to_int32,
    float_to_int64,
    int_to_float32,
    int_to_float64,
    int_to_string,
    string_to_bool,
    string_to_float32,
    string_to_float64,
    string_to_int,
    string_to_int8,
    string_to_int32,
    string_to_int64,
)


@dataclass
class _Person:
    name: str
    age: int


# ------------------------------------------------------------ any_to_string


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (123, "123"),
        (123.45, "123.45"),
        ("hello", "hello"),
        (True, "true"),
        ([1, 2, 3], "[1 2 3]"),
        (_Person(name="John", age=30), "{John 30}"),
    ],
)
def test_any_to_string(value, expected):
    assert any_to_string(value) == expected


def test_any_to_string_none_and_map():
    assert any_to_string(None) == "<nil>"
    assert any_to_string({"b": 3.8, "a": 10, "c": True}) == "map[a:10 b:3.8 c:true]"


def test_any_to_string_large_float_uses_exponent():
    assert any_to_string(1000000.0) == "1e+06"


# ------------------------------------------------------------ booleans


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_string_to_bool_true(text):
    assert string_to_bool(text) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_string_to_bool_false(text):
    assert string_to_bool(text) is False


@pytest.mark.parametrize("text", ["", "yes", "tRUE", " true"])
def test_string_to_bool_rejects(text):
    with pytest.raises(ValueError):
        string_to_bool(text)


@pytest.mark.parametrize("value", [True, False])
def test_bool_round_trip(value):
    assert string_to_bool(bool_to_string(value)) is value


# ------------------------------------------------------------ floats


@pytest.mark.parametrize(("number", "expected"), [(123.45, "123.45"), (-67.89, "-67.89")])
def test_float32_to_string(number, expected):
    assert float32_to_string(number) == expected


@pytest.mark.parametrize(("number", "expected"), [(123.45, "123.45"), (-67.89, "-67.89")])
def test_float64_to_string(number, expected):
    assert float64_to_string(number) == expected


def test_float_to_string_has_no_exponent_or_trailing_zero():
    assert float64_to_string(1e22) == "10000000000000000000000"
    assert float64_to_string(1.0) == "1"


@pytest.mark.parametrize(("number", "expected"), [(123.45, 123), (-67.89, -67)])
def test_float_to_int_variants(number, expected):
    assert float_to_int(number) == expected
    assert float_to_int32(number) == expected
    assert float_to_int64(number) == expected


def test_float_to_int32_out_of_range():
    with pytest.raises(OverflowError):
        float_to_int32(2147483648.0)


# ------------------------------------------------------------ integers


@pytest.mark.parametrize(("number", "expected"), [(123, "123"), (-456, "-456")])
def test_int_to_string(number, expected):
    assert int_to_string(number) == expected


@pytest.mark.parametrize(("number", "expected"), [(123, 123.0), (-456, -456.0)])
def test_int_to_float(number, expected):
    assert int_to_float32(number) == expected
    assert int_to_float64(number) == expected


# ------------------------------------------------------------ strings


def test_string_to_int():
    assert string_to_int("123") == 123
    with pytest.raises(ValueError):
        string_to_int("abc")


def test_string_to_int32():
    assert string_to_int32("123") == 123
    with pytest.raises(ValueError):
        string_to_int32("abc")


def test_string_to_int64():
    assert string_to_int64("123") == 123
    with pytest.raises(ValueError):
        string_to_int64("abc")


def test_string_to_float32():
    result = string_to_float32("123.45")
    assert result == pytest.approx(123.45, rel=1e-6)
    assert float32_to_string(result) == "123.45"
    with pytest.raises(ValueError):
        string_to_float32("abc")


def test_string_to_float64():
    assert string_to_float64("123.45") == 123.45
    with pytest.raises(ValueError):
        string_to_float64("abc")


def test_int_ranges():
    assert string_to_int8("-128") == -128
    assert string_to_int8("127") == 127
    with pytest.raises(ValueError):
        string_to_int8("128")
    with pytest.raises(ValueError):
        string_to_int32("2147483648")
    with pytest.raises(ValueError):
        string_to_int("9223372036854775808")


@pytest.mark.parametrize("text", [" 5", "1_000", "", "+", "0x10", "1.0"])
def test_string_to_int_rejects_non_decimal(text):
    with pytest.raises(ValueError):
        string_to_int(text)


def test_string_to_int_accepts_sign():
    assert string_to_int("+5") == 5
    assert string_to_int("-5") == -5


def test_string_to_float_errors_and_specials():
    with pytest.raises(ValueError):
        string_to_float64("1e400")
    with pytest.raises(ValueError):
        string_to_float32("1e39")
    with pytest.raises(ValueError):
        string_to_float64("1_0")
    assert string_to_float64("-Inf") == float("-inf")
    assert string_to_float64("0x1p-2") == 0.25


def test_error_message_names_the_input():
    with pytest.raises(ValueError, match="error converting string to int 'abc'"):
        string_to_int("abc")