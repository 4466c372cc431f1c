from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .errors import DatebookError, ErrorKind
from .models import Entry, Holiday, PartialDate, Person, Special, TokenizedLine

# Entry lines:
#   person  = first, last, nickname ; birthday ; saint day ; wedding day
#   holiday = name ; begin [; end]
#   special = name ; date
# Dates are "day, month" or "day, month, year".

COMMENT = "#"
KEYWORD_SEP = "="
SLOT_SEP = ";"
FIELD_SEP = ","

MAX_YEAR = 9999  # datetime.date range


# =====================
# Tokenizer
# =====================

def strip_comment(line: str) -> str:
    """Drops everything from the first '#' on (full-line and inline comments)."""
    idx = line.find(COMMENT)
    if idx >= 0:
        line = line[:idx]
    return line.strip()


def split_slot(slot: str) -> List[str]:
    return [field.strip() for field in slot.split(FIELD_SEP)]


def is_blank_slot(slot: Optional[List[str]]) -> bool:
    return not slot or all(not field for field in slot)


def tokenize_line(line: str) -> Optional[TokenizedLine]:
    """
    Splits one entry line into its keyword and ';'-separated slots, each slot
    being a list of ','-separated, trimmed sub-fields.
    Returns None for blank and comment lines.
    """
    text = strip_comment(line or "")
    if not text:
        return None
    keyword, sep, body = text.partition(KEYWORD_SEP)
    if not sep:
        raise DatebookError(ErrorKind.MALFORMED_LINE, f"missing '{KEYWORD_SEP}' separator", text=text)
    slots = [split_slot(slot) for slot in body.split(SLOT_SEP)]
    return TokenizedLine(keyword=keyword.strip(), slots=slots)


# =====================
# Dates
# =====================

def _parse_number(token: str, what: str, low: int, high: int) -> int:
    if not token.isdigit() or not token.isascii():
        raise DatebookError(ErrorKind.INVALID_DATE_VALUE, f"{what} is not an unsigned integer", text=token)
    value = int(token)
    if not low <= value <= high:
        raise DatebookError(ErrorKind.INVALID_DATE_VALUE, f"{what} must be in {low}..{high}", text=token)
    return value


def parse_partial_date(tokens: List[str]) -> PartialDate:
    """
    "day, month" -> recurring date, "day, month, year" -> dated.
    Month lengths are not checked here (30/02 is accepted).
    """
    if len(tokens) not in (2, 3):
        raise DatebookError(
            ErrorKind.INVALID_DATE_ARITY,
            f"expected day, month[, year], got {len(tokens)} fields",
            text=FIELD_SEP.join(tokens),
        )
    day = _parse_number(tokens[0], "day", 1, 31)
    month = _parse_number(tokens[1], "month", 1, 12)
    year = _parse_number(tokens[2], "year", 1, MAX_YEAR) if len(tokens) == 3 else None
    return PartialDate(day=day, month=month, year=year)


def _optional_date(slots: List[List[str]], idx: int) -> Optional[PartialDate]:
    slot = _slot(slots, idx)
    if is_blank_slot(slot):
        return None
    return parse_partial_date(slot)


# =====================
# Entries
# =====================

def _slot(slots: List[List[str]], idx: int) -> List[str]:
    return slots[idx] if idx < len(slots) else []


def _check_arity(slots: List[List[str]], max_slots: int, keyword: str) -> None:
    extra = [slot for slot in slots[max_slots:] if not is_blank_slot(slot)]
    if extra:
        raise DatebookError(
            ErrorKind.TOO_MANY_FIELDS,
            f"'{keyword}' takes at most {max_slots} slots",
            text=SLOT_SEP.join(FIELD_SEP.join(slot) for slot in extra),
        )


def _required_name(slots: List[List[str]], keyword: str) -> str:
    # commas are allowed inside holiday/special names
    name = ", ".join(field for field in _slot(slots, 0) if field)
    if not name:
        raise DatebookError(ErrorKind.MISSING_REQUIRED_FIELD, f"'{keyword}' requires a name")
    return name


def _required_date(slots: List[List[str]], idx: int, keyword: str, what: str = "date") -> PartialDate:
    slot = _slot(slots, idx)
    if is_blank_slot(slot):
        raise DatebookError(ErrorKind.MISSING_REQUIRED_FIELD, f"'{keyword}' requires a {what}")
    return parse_partial_date(slot)


def parse_person(slots: List[List[str]]) -> Person:
    _check_arity(slots, 4, "person")
    names = _slot(slots, 0)
    if len(names) > 3:
        raise DatebookError(ErrorKind.TOO_MANY_FIELDS, "expected first, last, nickname",
                            text=FIELD_SEP.join(names))
    first, last, nickname = (names + ["", "", ""])[:3]
    if not first and not nickname:
        raise DatebookError(ErrorKind.MISSING_REQUIRED_FIELD, "at least first name or nickname must be provided")

    saint_day = _optional_date(slots, 2)
    if saint_day is not None and saint_day.year is not None:
        raise DatebookError(ErrorKind.UNEXPECTED_YEAR, "saint days recur every year",
                            text=FIELD_SEP.join(_slot(slots, 2)))

    return Person(
        first_name=first or None,
        last_name=last or None,
        nickname=nickname or None,
        birthday=_optional_date(slots, 1),
        saint_day=saint_day,
        wedding_day=_optional_date(slots, 3),
    )


def parse_holiday(slots: List[List[str]]) -> Holiday:
    _check_arity(slots, 3, "holiday")
    name = _required_name(slots, "holiday")
    begin = _required_date(slots, 1, "holiday", "begin date")
    end = _optional_date(slots, 2)
    if end is not None and (begin.year is None or end.year is None):
        raise DatebookError(ErrorKind.MISSING_YEAR, "holiday spans need a year on both dates")
    return Holiday(name=name, begin=begin, end=end)


def parse_special(slots: List[List[str]]) -> Special:
    _check_arity(slots, 2, "special")
    name = _required_name(slots, "special")
    date = _required_date(slots, 1, "special")
    return Special(name=name, date=date)


PARSERS: Dict[str, Callable[[List[List[str]]], Entry]] = {
    "person": parse_person,
    "holiday": parse_holiday,
    "special": parse_special,
}


def parse_entry(tokenized: TokenizedLine) -> Entry:
    parser = PARSERS.get(tokenized.keyword)
    if parser is None:
        raise DatebookError(ErrorKind.UNKNOWN_ENTRY_KIND, "expected person, holiday or special",
                            text=tokenized.keyword)
    return parser(tokenized.slots)


def parse_line(line: str) -> Optional[Entry]:
    """Entry for one raw line, None for blank and comment lines."""
    tokenized = tokenize_line(line)
    if tokenized is None:
        return None
    try:
        return parse_entry(tokenized)
    except DatebookError as e:
        if e.text is None:
            e.text = strip_comment(line)
        raise
