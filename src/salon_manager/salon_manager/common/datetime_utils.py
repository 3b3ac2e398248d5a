from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Union

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value)


def to_date(value: DateLike) -> date:
    """Normalize a date, datetime or ``YYYY-MM-DD`` string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value[:10])


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def month_bounds(value: DateLike) -> tuple[date, date]:
    """First and last calendar day of the month containing ``value``."""
    d = to_date(value)
    last_day = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=1), d.replace(day=last_day)


def shift_months(value: DateLike, months: int) -> date:
    """Move ``months`` calendar months, clamping the day to the target month length."""
    d = to_date(value)
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def week_start(value: DateLike) -> date:
    """Monday of the week containing ``value``."""
    d = to_date(value)
    return d - timedelta(days=d.weekday())
