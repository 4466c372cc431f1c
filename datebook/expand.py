from __future__ import annotations

from typing import Iterable, List

from .dates import from_date, iter_days, to_date
from .errors import DatebookError, ErrorKind
from .models import Entry, Event, EventKind, Holiday, Person, Special


def expand_person(person: Person) -> List[Event]:
    name = person.display_name
    fields = (
        (EventKind.BIRTHDAY, person.birthday),
        (EventKind.SAINT_DAY, person.saint_day),
        (EventKind.WEDDING_DAY, person.wedding_day),
    )
    return [
        Event(label=f"{name} {kind.value}", date=when, kind=kind, name=name)
        for kind, when in fields
        if when is not None
    ]


def expand_holiday(holiday: Holiday) -> List[Event]:
    """
    A single-day holiday gives one event; a span gives one event per day,
    begin and end included, in ascending order.
    """
    if holiday.end is None:
        return [Event(label=holiday.name, date=holiday.begin, kind=EventKind.HOLIDAY, name=holiday.name)]

    begin = to_date(holiday.begin)
    end = to_date(holiday.end)
    if end < begin:
        raise DatebookError(
            ErrorKind.INVALID_RANGE,
            f"'{holiday.name}' ends before it begins",
            text=f"{holiday.begin} - {holiday.end}",
        )
    days = list(iter_days(begin, end))
    return [
        Event(
            label=holiday.name,
            date=from_date(day),
            kind=EventKind.HOLIDAY,
            name=holiday.name,
            remaining=len(days) - i - 1,
        )
        for i, day in enumerate(days)
    ]


def expand_special(special: Special) -> List[Event]:
    return [Event(label=special.name, date=special.date, kind=EventKind.SPECIAL, name=special.name)]


def expand(entry: Entry) -> List[Event]:
    if isinstance(entry, Person):
        return expand_person(entry)
    if isinstance(entry, Holiday):
        return expand_holiday(entry)
    if isinstance(entry, Special):
        return expand_special(entry)
    raise TypeError(f"not an entry: {entry!r}")


def expand_all(entries: Iterable[Entry]) -> List[Event]:
    out: List[Event] = []
    for entry in entries:
        out.extend(expand(entry))
    return out
