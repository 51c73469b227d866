from datetime import datetime, timedelta, timezone

import pytest

from nopain.nullable import (
    float32_or_none_to_string,
    float64_or_none_to_string,
    format_time_optional,
    int_or_none_to_string,
    optional_to_string,
    string_or_none,
    string_to_float32_or_none,
    string_to_float64_or_none,
    string_to_int32_or_none,
    string_to_int64_or_none,
    string_to_int_or_none,
)


@pytest.mark.parametrize(
    "parse", [string_to_int_or_none, string_to_int32_or_none, string_to_int64_or_none]
)
def test_integer_parsers(parse):
    assert parse("123") == 123
    assert parse("") is None
    assert parse("abc") is None


def test_int32_out_of_range_is_none():
    assert string_to_int32_or_none("2147483648") is None


def test_string_to_float32_or_none():
    value = string_to_float32_or_none("123.45")
    assert value == pytest.approx(123.45, rel=1e-6)
    assert float32_or_none_to_string(value) == "123.45"
    assert string_to_float32_or_none("") is None
    assert string_to_float32_or_none("abc") is None


def test_string_to_float64_or_none():
    assert string_to_float64_or_none("123.45") == 123.45
    assert string_to_float64_or_none("") is None
    assert string_to_float64_or_none("abc") is None


def test_string_or_none():
    assert string_or_none("test") == "test"
    assert string_or_none("") is None


def test_int_or_none_to_string():
    assert int_or_none_to_string(123) == "123"
    assert int_or_none_to_string(None) == ""


def test_float32_or_none_to_string():
    assert float32_or_none_to_string(123.45) == "123.45"
    assert float32_or_none_to_string(None) == ""


def test_float64_or_none_to_string():
    assert float64_or_none_to_string(123.45) == "123.45"
    assert float64_or_none_to_string(None) == ""


@pytest.mark.parametrize("text", ["", "abc", "with space"])
def test_optional_round_trip(text):
    assert optional_to_string(string_or_none(text)) == text


def test_optional_to_string_none():
    assert optional_to_string(None) == ""


def test_format_time_optional_utc():
    moment = datetime(2024, 1, 2, 3, 4, 5, 678, tzinfo=timezone.utc)
    assert format_time_optional(moment) == "2024-01-02T03:04:05Z"


def test_format_time_optional_offset():
    zone = timezone(timedelta(hours=-5, minutes=-30))
    moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=zone)
    assert format_time_optional(moment) == "2024-01-02T03:04:05-05:30"


def test_format_time_optional_none():
    assert format_time_optional(None) is None