"""Parsing, formatting, extraction and validation of dates and times."""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo

_DIGITS_DATE = r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
_DIGITS_CLOCK = (
    r"(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:[.,](?P<fraction>[0-9]+))?"
)

_DATE_RE = re.compile(_DIGITS_DATE)
_DATETIME_RE = re.compile(_DIGITS_DATE + " " + _DIGITS_CLOCK)
_YEAR_RE = re.compile(r"(?P<year>[0-9]{4})")
_YEAR_MONTH_RE = re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})")
_CLOCK_RE = re.compile(_DIGITS_CLOCK)
_CLOCK_MILLIS_RE = re.compile(
    r"(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"\.(?P<fraction>[0-9]{3})"
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_in(year: int, month: int) -> int:
    if month == 2 and _is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _fields(pattern: re.Pattern[str], text: str) -> dict[str, int]:
    """Match ``text`` against ``pattern`` and check every field's range."""
    match = pattern.fullmatch(text)
    if match is None:
        raise ValueError(f'cannot parse "{text}"')
    groups = {key: value for key, value in match.groupdict().items() if value is not None}
    fraction = groups.pop("fraction", "")
    fields = {
        "year": 1,
        "month": 1,
        "day": 1,
        "hour": 0,
        "minute": 0,
        "second": 0,
        **{key: int(value) for key, value in groups.items()},
    }
    fields["microsecond"] = int((fraction + "000000")[:6])
    if not 1 <= fields["month"] <= 12:
        raise ValueError(f'parsing "{text}": month out of range')
    if not 1 <= fields["day"] <= _days_in(fields["year"], fields["month"]):
        raise ValueError(f'parsing "{text}": day out of range')
    if fields["hour"] > 23:
        raise ValueError(f'parsing "{text}": hour out of range')
    if fields["minute"] > 59:
        raise ValueError(f'parsing "{text}": minute out of range')
    if fields["second"] > 59:
        raise ValueError(f'parsing "{text}": second out of range')
    return fields


def _is_valid(pattern: re.Pattern[str], text: str) -> bool:
    try:
        _fields(pattern, text)
    except ValueError:
        return False
    return True


def _date_text(moment: datetime) -> str:
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def _clock_text(moment: datetime) -> str:
    return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


# ---------------------------------------------------------------- conversion


def string_to_date(text: str) -> datetime:
    """Parse ``YYYY-MM-DD`` into a UTC datetime at midnight."""
    try:
        return datetime(**_fields(_DATE_RE, text), tzinfo=timezone.utc)
    except ValueError as exc:
        raise ValueError(f"error parsing date: {exc}") from exc


def string_to_datetime(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` into a UTC datetime."""
    try:
        return datetime(**_fields(_DATETIME_RE, text), tzinfo=timezone.utc)
    except ValueError as exc:
        raise ValueError(f"error parsing dateTime: {exc}") from exc


def date_to_string(moment: datetime) -> str:
    """Format as ``YYYY-MM-DD``."""
    return _date_text(moment)


def datetime_to_string(moment: datetime) -> str:
    """Format as ``YYYY-MM-DD HH:MM:SS``."""
    return f"{_date_text(moment)} {_clock_text(moment)}"


# ---------------------------------------------------------------- current time


def current_date() -> str:
    """Today's local date as ``YYYY-MM-DD``."""
    return _date_text(datetime.now())


def current_datetime() -> str:
    """The local date and time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime_to_string(datetime.now())


def current_year() -> str:
    """The local year as ``YYYY``."""
    return f"{datetime.now().year:04d}"


def current_time() -> str:
    """The seconds of the local time as ``SS``."""
    return f"{datetime.now().second:02d}"


def current_hour() -> str:
    """The local time as ``HH:MM:SS``."""
    return _clock_text(datetime.now())


# ---------------------------------------------------------------- extraction


def _zone_name(zone: tzinfo, moment: datetime) -> str:
    if zone is timezone.utc:
        return "UTC"
    key = getattr(zone, "key", None)
    if isinstance(key, str):
        return key
    return zone.tzname(moment) or ""


def extract_time_zone(moment: datetime) -> tuple[str, int]:
    """Return the zone name and the whole hours of its offset from UTC.

    A naive datetime is taken to be in local time and named ``Local``.
    """
    if moment.tzinfo is None:
        name = "Local"
        aware = moment.astimezone()
    else:
        name = _zone_name(moment.tzinfo, moment)
        aware = moment
    offset = aware.utcoffset()
    seconds = int(offset.total_seconds()) if offset is not None else 0
    return name, int(seconds / 3600)


def extract_datetime(moment: datetime) -> str:
    """Format as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime_to_string(moment)


def extract_date(moment: datetime) -> str:
    """Format as ``YYYY-MM-DD``."""
    return _date_text(moment)


def extract_year(moment: datetime) -> str:
    """The year as ``YYYY``."""
    return f"{moment.year:04d}"


def extract_month(moment: datetime) -> str:
    """The month as ``MM``."""
    return f"{moment.month:02d}"


def extract_week(moment: datetime) -> str:
    """The ISO week number as two digits."""
    return f"{moment.isocalendar()[1]:02d}"


def extract_day(moment: datetime) -> str:
    """The day of the month as ``DD``."""
    return f"{moment.day:02d}"


def extract_hour(moment: datetime) -> str:
    """The time as ``HH:MM:SS``."""
    return _clock_text(moment)


def extract_seconds(moment: datetime) -> str:
    """The seconds as ``SS``."""
    return f"{moment.second:02d}"


def extract_milliseconds(moment: datetime) -> str:
    """The time with milliseconds as ``HH:MM:SS.mmm``."""
    return f"{_clock_text(moment)}.{moment.microsecond // 1000:03d}"


# ---------------------------------------------------------------- validation


def is_valid_datetime(text: str) -> bool:
    """True for a valid ``YYYY-MM-DD HH:MM:SS``."""
    return _is_valid(_DATETIME_RE, text)


def is_valid_date(text: str) -> bool:
    """True for a valid ``YYYY-MM-DD``."""
    return _is_valid(_DATE_RE, text)


def is_valid_year(text: str) -> bool:
    """True for a four-digit year."""
    return _is_valid(_YEAR_RE, text)


def is_valid_month(text: str) -> bool:
    """True for a valid ``YYYY-MM``."""
    return _is_valid(_YEAR_MONTH_RE, text)


def is_valid_day(text: str) -> bool:
    """True for a valid ``YYYY-MM-DD``."""
    return _is_valid(_DATE_RE, text)


def is_valid_hour(text: str) -> bool:
    """True for a valid ``HH:MM:SS``."""
    return _is_valid(_CLOCK_RE, text)


def is_valid_second(text: str) -> bool:
    """True for a valid two-digit seconds value."""
    return _is_valid(_CLOCK_RE, "00:00:" + text)


def is_valid_millisecond(text: str) -> bool:
    """True for a valid three-digit milliseconds value."""
    return _is_valid(_CLOCK_MILLIS_RE, "00:00:00." + text)