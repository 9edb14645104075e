from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.constants import DATE_FORMAT, MONTH_ID_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_month_id(month_id: str) -> date:
    """Parse YYYY-MM into the first day of that month."""
    return datetime.strptime(month_id, MONTH_ID_FORMAT).date()


def month_id_of(day: date) -> str:
    return day.strftime(MONTH_ID_FORMAT)


def iter_month_days(month_id: str) -> Iterator[date]:
    """Yield every calendar day of the month, first to last."""
    start = parse_month_id(month_id)
    _, last = calendar.monthrange(start.year, start.month)
    for offset in range(last):
        yield start + timedelta(days=offset)


def months_between_inclusive(start_month_id: str, end_month_id: str) -> int:
    """Count calendar months from start through end, both included.

    >>> months_between_inclusive("2024-01", "2024-03")
    3
    """
    start = parse_month_id(start_month_id)
    end = parse_month_id(end_month_id)
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def current_month_id() -> str:
    return month_id_of(now_local().date())
