from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


@dataclass(frozen=True)
class PartialDate:
    day: int                    # 1..31
    month: int                  # 1..12
    year: Optional[int] = None  # None -> recurring every year

    @property
    def is_recurring(self) -> bool:
        return self.year is None

    def sort_key(self) -> tuple:
        return (self.year or 0, self.month, self.day)

    def __str__(self) -> str:
        if self.year is None:
            return f"{self.day:02d}/{self.month:02d}"
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"


@dataclass(frozen=True)
class TokenizedLine:
    keyword: str
    slots: List[List[str]]


@dataclass(frozen=True)
class Person:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nickname: Optional[str] = None
    birthday: Optional[PartialDate] = None
    saint_day: Optional[PartialDate] = None     # always year-less
    wedding_day: Optional[PartialDate] = None

    @property
    def display_name(self) -> str:
        """
        First and last name, first name alone, or the nickname.
        The nickname comes last: "Santa, CLAUS, St Nicholas" shows as "Santa CLAUS".
        """
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name or self.nickname or ""


@dataclass(frozen=True)
class Holiday:
    name: str
    begin: PartialDate
    end: Optional[PartialDate] = None   # set -> span, both ends dated


@dataclass(frozen=True)
class Special:
    name: str
    date: PartialDate


Entry = Union[Person, Holiday, Special]


class EventKind(str, Enum):
    BIRTHDAY = "birthday"
    SAINT_DAY = "saint_day"
    WEDDING_DAY = "wedding_day"
    HOLIDAY = "holiday"
    SPECIAL = "special"

    @property
    def is_personal(self) -> bool:
        return self in (EventKind.BIRTHDAY, EventKind.SAINT_DAY, EventKind.WEDDING_DAY)

    @property
    def caption(self) -> str:
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class Event:
    label: str
    date: PartialDate
    kind: EventKind
    name: str = ""
    remaining: Optional[int] = None   # days left in a holiday span after this one
