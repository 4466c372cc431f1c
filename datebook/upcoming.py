# datebook/upcoming.py
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .dates import clamp_to_year, next_occurrence
from .models import Event, EventKind

_LOGGER = logging.getLogger(__name__)

# datetime64[ns] stops in 2262
LAST_TIMESTAMP_DAY = pd.Timestamp.max.date()

COLUMNS = ["kind", "label", "name", "date", "days", "years", "remaining"]


def recurs_yearly(event: Event) -> bool:
    """Personal dates are anniversaries; other events recur only without a year."""
    return event.kind.is_personal or event.date.is_recurring


def occurrence_date(event: Event, today: date) -> Optional[date]:
    """
    Next day (from ``today`` included) the event falls on.
    One-off events already in the past give None; a day past the month's
    end (30/02) falls on its last day.
    """
    if recurs_yearly(event):
        return next_occurrence(event.date, today)
    when = clamp_to_year(event.date, event.date.year)
    return when if when >= today else None


def years_elapsed(event: Event, when: date) -> Optional[int]:
    """Age for birthdays, anniversary number for weddings (needs the original year)."""
    if not event.kind.is_personal or event.date.year is None:
        return None
    return when.year - event.date.year


def upcoming_frame(events: Iterable[Event], today: Optional[date] = None) -> pd.DataFrame:
    """
    One row per event still to come, sorted by date then label:
      - kind      : EventKind value
      - label     : event label
      - name      : person / holiday / special name
      - date      : concrete day (datetime64)
      - days      : days from ``today``
      - years     : years since the original date (personal events with a year)
      - remaining : days left in a holiday span after this one
    """
    today = today or date.today()
    rows: List[Dict[str, object]] = []
    for ev in events:
        when = occurrence_date(ev, today)
        if when is None:
            continue
        if when > LAST_TIMESTAMP_DAY:
            _LOGGER.warning("%s on %s is past the last day pandas can hold, skipped", ev.label, when)
            continue
        rows.append({
            "kind": ev.kind.value,
            "label": ev.label,
            "name": ev.name or ev.label,
            "date": when,
            "days": (when - today).days,
            "years": years_elapsed(ev, when),
            "remaining": ev.remaining,
        })

    df = pd.DataFrame(rows, columns=COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    df["days"] = df["days"].astype("int64")
    df["years"] = df["years"].astype("Int64")
    df["remaining"] = df["remaining"].astype("Int64")
    return df.sort_values(["date", "label"], kind="stable").reset_index(drop=True)


def next_by_kind(frame: pd.DataFrame) -> Dict[EventKind, pd.DataFrame]:
    """For each kind, every row sharing the earliest date (empty frame if none)."""
    out: Dict[EventKind, pd.DataFrame] = {}
    for kind in EventKind:
        sub = frame[frame["kind"] == kind.value]
        if not sub.empty:
            sub = sub[sub["date"] == sub["date"].min()]
        out[kind] = sub.reset_index(drop=True)
    return out
