# datebook/dates.py
from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Iterator

from .errors import DatebookError, ErrorKind
from .models import PartialDate


def is_leap(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(month: int, year: int) -> int:
    return calendar.monthrange(year, month)[1]


def to_date(partial: PartialDate, year: int | None = None) -> date:
    """Concrete date for a PartialDate (``year`` fills in recurring dates)."""
    y = partial.year if partial.year is not None else year
    if y is None:
        raise DatebookError(ErrorKind.MISSING_YEAR, "recurring date has no year", text=str(partial))
    if partial.day > days_in_month(partial.month, y):
        raise DatebookError(ErrorKind.INVALID_DATE_VALUE, f"no such day in {y}", text=str(partial))
    return date(y, partial.month, partial.day)


def from_date(value: date) -> PartialDate:
    return PartialDate(day=value.day, month=value.month, year=value.year)


def iter_days(begin: date, end: date) -> Iterator[date]:
    """Every day from begin through end, both included."""
    # counted, so a span ending on date.max never steps past it
    for offset in range((end - begin).days + 1):
        yield begin + timedelta(days=offset)


def clamp_to_year(partial: PartialDate, year: int) -> date:
    """Same day/month in ``year``; days past the month's end (29/02) fall on its last day."""
    day = min(partial.day, days_in_month(partial.month, year))
    return date(year, partial.month, day)


def next_occurrence(partial: PartialDate, today: date) -> date:
    """The sole date in [today, today + 1 year) with the same day and month."""
    candidate = clamp_to_year(partial, today.year)
    if candidate < today:
        candidate = clamp_to_year(partial, today.year + 1)
    return candidate
