from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from nopain import timeformat


def test_string_to_date_round_trip():
    text = "2024-09-27"
    moment = timeformat.string_to_date(text)
    assert timeformat.date_to_string(moment) == text
    assert moment.utcoffset() == timedelta(0)


def test_string_to_datetime_round_trip():
    text = "2024-09-27 12:54:09"
    moment = timeformat.string_to_datetime(text)
    assert timeformat.datetime_to_string(moment) == text
    assert moment.utcoffset() == timedelta(0)


def test_string_to_datetime_accepts_fraction():
    moment = timeformat.string_to_datetime("2024-09-27 12:54:09.5")
    assert moment.microsecond == 500000


def test_string_to_date_invalid():
    with pytest.raises(ValueError, match="error parsing date"):
        timeformat.string_to_date("2024-13-01")


def test_string_to_datetime_invalid():
    with pytest.raises(ValueError, match="error parsing dateTime"):
        timeformat.string_to_datetime("2024-09-27")


def test_datetime_to_string_pads_fields():
    moment = datetime(33, 1, 2, 3, 4, 5)
    text = timeformat.datetime_to_string(moment)
    assert len(text) == 19
    assert timeformat.string_to_datetime(text).replace(tzinfo=None) == moment


@pytest.mark.parametrize(
    "text, expected",
    [("0000-00-00", False), ("2024-09-270", False), ("2024-02-29", True), ("2023-02-29", False)],
)
def test_is_valid_date(text, expected):
    assert timeformat.is_valid_date(text) is expected
    assert timeformat.is_valid_day(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("20000-008-10 10:00:2", False), ("2024-09-27 12:54:09", True), ("2024-09-27 24:00:00", False)],
)
def test_is_valid_datetime(text, expected):
    assert timeformat.is_valid_datetime(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("1:00:802", False), ("12:54:09", True), ("1:00:00", True), ("24:00:00", False), ("12:60:00", False)],
)
def test_is_valid_hour(text, expected):
    assert timeformat.is_valid_hour(text) is expected


@pytest.mark.parametrize("text, expected", [("2024", True), ("24", False), ("20245", False)])
def test_is_valid_year(text, expected):
    assert timeformat.is_valid_year(text) is expected


@pytest.mark.parametrize("text, expected", [("2024-09", True), ("2024-13", False), ("2024-9", False)])
def test_is_valid_month(text, expected):
    assert timeformat.is_valid_month(text) is expected


@pytest.mark.parametrize("text, expected", [("59", True), ("60", False), ("5", False)])
def test_is_valid_second(text, expected):
    assert timeformat.is_valid_second(text) is expected


@pytest.mark.parametrize("text, expected", [("123", True), ("12", False), ("1234", False)])
def test_is_valid_millisecond(text, expected):
    assert timeformat.is_valid_millisecond(text) is expected


def test_extraction():
    moment = timeformat.string_to_datetime("2024-09-27 12:54:09.123")
    assert timeformat.extract_datetime(moment) == "2024-09-27 12:54:09"
    assert timeformat.extract_date(moment) == "2024-09-27"
    assert timeformat.extract_year(moment) == "2024"
    assert timeformat.extract_month(moment) == "09"
    assert timeformat.extract_day(moment) == "27"
    assert timeformat.extract_hour(moment) == "12:54:09"
    assert timeformat.extract_seconds(moment) == "09"
    assert timeformat.extract_milliseconds(moment) == "12:54:09.123"
    assert timeformat.extract_week(moment) == "39"


def test_extract_time_zone_utc():
    moment = timeformat.string_to_date("2024-09-27")
    assert timeformat.extract_time_zone(moment) == ("UTC", 0)


def test_extract_time_zone_truncates_offset():
    zone = timezone(-timedelta(hours=5, minutes=30))
    moment = datetime(2024, 9, 27, tzinfo=zone)
    assert timeformat.extract_time_zone(moment)[1] == -5


@freeze_time("2024-09-27 12:54:09")
def test_current_values():
    assert timeformat.current_date() == "2024-09-27"
    assert timeformat.current_datetime() == "2024-09-27 12:54:09"
    assert timeformat.current_year() == "2024"
    assert timeformat.current_hour() == "12:54:09"
    assert timeformat.current_time() == "09"