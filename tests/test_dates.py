from datetime import date

import pytest

from datebook.dates import days_in_month, is_leap, iter_days, next_occurrence, to_date
from datebook.errors import DatebookError, ErrorKind
from datebook.models import PartialDate


def test_is_leap_follows_gregorian_rules():
    assert is_leap(2000)
    assert is_leap(2024)
    assert not is_leap(1900)
    assert not is_leap(2023)


def test_days_in_month():
    assert days_in_month(2, 2024) == 29
    assert days_in_month(2, 2023) == 28
    assert days_in_month(4, 2023) == 30
    assert days_in_month(12, 2023) == 31


def test_to_date_fills_recurring_year_and_checks_calendar():
    assert to_date(PartialDate(25, 12), 2026) == date(2026, 12, 25)
    assert to_date(PartialDate(9, 4, 2023)) == date(2023, 4, 9)
    with pytest.raises(DatebookError) as info:
        to_date(PartialDate(29, 2, 2023))
    assert info.value.kind is ErrorKind.INVALID_DATE_VALUE


def test_iter_days_includes_both_ends():
    days = list(iter_days(date(2023, 12, 31), date(2024, 1, 2)))
    assert days == [date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 2)]
    assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []
    assert list(iter_days(date(9999, 12, 30), date.max)) == [date(9999, 12, 30), date.max]


def test_next_occurrence_within_one_year():
    today = date(2026, 10, 18)
    assert next_occurrence(PartialDate(25, 12), today) == date(2026, 12, 25)
    assert next_occurrence(PartialDate(18, 10), today) == today
    assert next_occurrence(PartialDate(17, 10), today) == date(2027, 10, 17)
    # the original year does not matter
    assert next_occurrence(PartialDate(1, 4, 1990), today) == date(2027, 4, 1)


def test_next_occurrence_maps_leap_day_to_28_february():
    assert next_occurrence(PartialDate(29, 2), date(2023, 1, 1)) == date(2023, 2, 28)
    assert next_occurrence(PartialDate(29, 2), date(2023, 3, 1)) == date(2024, 2, 29)
    assert next_occurrence(PartialDate(31, 4), date(2023, 1, 1)) == date(2023, 4, 30)
