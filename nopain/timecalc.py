"""Date arithmetic, period ends and relative descriptions of time."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_NANOS_PER_SECOND = 10**9


def _add_date(moment: datetime, years: int = 0, months: int = 0, days: int = 0) -> datetime:
    """Add calendar units, letting an overflowing day roll into the next month."""
    total = moment.month - 1 + months
    year = moment.year + years + total // 12
    month = total % 12 + 1
    first = moment.replace(year=year, month=month, day=1)
    return first + timedelta(days=moment.day - 1 + days)


def _first_of_month(year: int, month: int) -> datetime:
    total = month - 1
    return datetime(year + total // 12, total % 12 + 1, 1)


# ---------------------------------------------------------------- period ends


def last_date_of_year() -> datetime:
    """Midnight of 31 December of the current local year."""
    return datetime(datetime.now().year, 12, 31)


def last_day_of_current_week() -> datetime:
    """23:59:59 of the coming Sunday, the day taken on UTC boundaries."""
    now = datetime.now()
    days_until_sunday = 7 - now.isoweekday() % 7
    shifted = (now + timedelta(days=days_until_sunday)).astimezone(timezone.utc)
    midnight = shifted.replace(hour=0, minute=0, second=0, microsecond=0)
    end = midnight + timedelta(hours=23, minutes=59, seconds=59)
    return end.astimezone().replace(tzinfo=None)


def last_day_of_current_month() -> datetime:
    """The last instant of the current local month."""
    now = datetime.now()
    return last_day_of_month(now.year, now.month)


def last_day_of_month(year: int, month: int) -> datetime:
    """The last instant of the given month."""
    return _first_of_month(year, int(month) + 1) - timedelta(microseconds=1)


def last_day_of_week(year: int, week: int) -> datetime:
    """Six days after the start of the given week, counting weeks from 1 January."""
    first_day = datetime(year, 1, 1) + timedelta(days=(week - 1) * 7)
    return first_day + timedelta(days=6)


# ---------------------------------------------------------------- arithmetic


def add_days(moment: datetime, days: int) -> datetime:
    """Add ``days`` days."""
    return _add_date(moment, days=days)


def subtract_days(moment: datetime, days: int) -> datetime:
    """Subtract ``days`` days."""
    return _add_date(moment, days=-days)


def add_weeks(moment: datetime, weeks: int) -> datetime:
    """Add ``weeks`` weeks."""
    return _add_date(moment, days=weeks * 7)


def subtract_weeks(moment: datetime, weeks: int) -> datetime:
    """Subtract ``weeks`` weeks."""
    return _add_date(moment, days=-weeks * 7)


def add_months(moment: datetime, months: int) -> datetime:
    """Add ``months`` months; a day past the month's end rolls over."""
    return _add_date(moment, months=months)


def subtract_months(moment: datetime, months: int) -> datetime:
    """Subtract ``months`` months; a day past the month's end rolls over."""
    return _add_date(moment, months=-months)


def add_years(moment: datetime, years: int) -> datetime:
    """Add ``years`` years; 29 February rolls over in common years."""
    return _add_date(moment, years=years)


def subtract_years(moment: datetime, years: int) -> datetime:
    """Subtract ``years`` years; 29 February rolls over in common years."""
    return _add_date(moment, years=-years)


def sum_dates(first: datetime, second: datetime) -> datetime:
    """``first`` moved by the span from ``first`` to ``second``."""
    return first + (second - first)


def subtract_dates(first: datetime, second: datetime) -> timedelta:
    """The span from ``second`` to ``first``."""
    return first - second


def get_age(birth_date: datetime) -> int:
    """Whole years since ``birth_date``, comparing days of the year."""
    current = datetime.now()
    age = current.year - birth_date.year
    if current.timetuple().tm_yday < birth_date.timetuple().tm_yday:
        age -= 1
    return age


# ---------------------------------------------------------------- relative time


def time_ago(from_time: datetime) -> str:
    """Describe how long ago ``from_time`` was, in its largest whole unit."""
    now = datetime.now(from_time.tzinfo) if from_time.tzinfo else datetime.now()
    seconds = (now - from_time).total_seconds()
    hours = seconds / 3600
    units = (
        ("years", int(hours / 24 / 365)),
        ("months", int(hours / 24 / 30)),
        ("days", int(hours / 24)),
        ("hours", int(hours)),
        ("minutes", int(seconds / 60)),
    )
    for name, amount in units:
        if amount >= 1:
            return f"{amount} {name} ago"
    return f"{int(seconds)} seconds ago"


def _with_fraction(value: int, scale: int) -> str:
    whole, rest = divmod(value, scale)
    if not rest:
        return str(whole)
    width = len(str(scale)) - 1
    return f"{whole}." + f"{rest:0{width}d}".rstrip("0")


def _duration_text(span: timedelta) -> str:
    """Render a span as hours, minutes and seconds, e.g. ``72h3m0.5s``."""
    nanos = ((span.days * 86400 + span.seconds) * 1_000_000 + span.microseconds) * 1000
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    size = abs(nanos)
    if size < _NANOS_PER_SECOND:
        if size < 1000:
            return f"{sign}{size}ns"
        if size < 1_000_000:
            return f"{sign}{_with_fraction(size, 1000)}µs"
        return f"{sign}{_with_fraction(size, 1_000_000)}ms"
    text = _with_fraction(size % (60 * _NANOS_PER_SECOND), _NANOS_PER_SECOND) + "s"
    minutes = size // (60 * _NANOS_PER_SECOND)
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def time_ago_between(start: datetime, end: datetime) -> str:
    """Describe both moments relative to now, with the span between them."""
    return f"{time_ago(start)} to {time_ago(end)} ({_duration_text(end - start)})"