# report/console.py
from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd

from datebook.models import EventKind

DATE_FMT = "%d/%m/%Y"


def describe(row: pd.Series) -> str:
    """Name plus age / anniversary / days left, as shown next to a date."""
    name = str(row["name"])
    years = row["years"]
    remaining = row["remaining"]
    if row["kind"] == EventKind.BIRTHDAY.value and not pd.isna(years):
        return f"{name} (age {int(years)})"
    if row["kind"] == EventKind.WEDDING_DAY.value and not pd.isna(years):
        return f"{name} (year {int(years)})"
    if not pd.isna(remaining):
        return f"{name} ({int(remaining)} days remaining)"
    return name


def when_text(days: int, when: pd.Timestamp) -> str:
    if days == 0:
        return "Today!"
    unit = "day" if days == 1 else "days"
    return f"{when.strftime(DATE_FMT)} (in {days} {unit})"


def format_next(kind: EventKind, rows: pd.DataFrame) -> str:
    """``next <kind>: <date> (in N days): a, b`` or ``none found``."""
    if rows.empty:
        return f"next {kind.caption}: none found"
    first = rows.iloc[0]
    names = ", ".join(describe(row) for _, row in rows.iterrows())
    return f"next {kind.caption}: {when_text(int(first['days']), first['date'])}: {names}"


def format_summary(next_rows: Dict[EventKind, pd.DataFrame]) -> List[str]:
    return [format_next(kind, rows) for kind, rows in next_rows.items()]


def format_agenda(frame: pd.DataFrame, limit: Optional[int] = None) -> List[str]:
    if frame.empty:
        return ["no upcoming events"]
    rows = frame if limit is None else frame.head(limit)
    width = max(len(k.caption) for k in EventKind)
    lines: List[str] = []
    for _, row in rows.iterrows():
        kind = EventKind(row["kind"]).caption
        lines.append(f"{row['date'].strftime(DATE_FMT)}  {int(row['days']):>4}d  {kind:<{width}}  {describe(row)}")
    return lines
