from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Iterator


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def now_local(tz: tzinfo) -> datetime:
    """Current time in the reporting timezone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def to_local(value: datetime, tz: tzinfo) -> datetime:
    """Aware datetimes are converted; naive ones are taken as already local."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def whole_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two datetimes, floored, clamped at zero."""
    if start.tzinfo is not None and end.tzinfo is not None:
        # elapsed time, not wall-clock difference (DST)
        start, end = start.astimezone(timezone.utc), end.astimezone(timezone.utc)
    minutes = int((end - start).total_seconds() // 60)
    return max(minutes, 0)


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def month_bounds(month: date) -> tuple[date, date]:
    last = calendar.monthrange(month.year, month.month)[1]
    return month.replace(day=1), month.replace(day=last)


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def weekday_count_between(start: date, end: date) -> int:
    """Number of Monday-Friday dates in [start, end]."""
    return sum(1 for d in iter_days(start, end) if d.weekday() < 5)


def weekday_count(year: int, month: int) -> int:
    start, end = month_bounds(date(year, month, 1))
    return weekday_count_between(start, end)
