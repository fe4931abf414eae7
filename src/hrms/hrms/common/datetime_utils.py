from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.exceptions import ValidationError

_HHMM_RE = re.compile(r"(\d{2}):(\d{2})(?::(\d{2}))?")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def parse_hhmm(value: Optional[str]) -> Optional[time]:
    """Parse an HH:MM (or HH:MM:SS, seconds dropped) string. Blank input means no time was given."""
    v = (value or "").strip()
    if not v:
        return None
    m = _HHMM_RE.fullmatch(v)
    try:
        if not m:
            raise ValueError(v)
        return time(int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)).replace(second=0)
    except ValueError:
        raise ValidationError(f"Invalid time {value!r} (expected HH:MM)")


def minutes_since_midnight(t: time) -> int:
    return t.hour * 60 + t.minute


def format_hhmm(t: Optional[time]) -> str:
    return t.strftime("%H:%M") if t else "-"


def month_bounds(day: date) -> tuple[date, date]:
    first = day.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return first, next_month - timedelta(days=1)


def working_days_between(start: date, end: date) -> int:
    """Count Monday-Friday days in the inclusive range."""
    days = 0
    current = start
    while current <= end:
        if current.weekday() < 5:
            days += 1
        current += timedelta(days=1)
    return days


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
