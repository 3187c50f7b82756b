from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def parse_hhmm(value: str) -> time:
    """Parse HH:MM (seconds optional) into a time of day."""
    if not isinstance(value, str):
        raise ValueError(f"Invalid time string: {value!r}")
    v = value.strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time string: {value!r}")


def format_hhmm(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


def now_local(tz_name: Optional[str] = None) -> datetime:
    """Current office-local time as a naive datetime.

    Falls back to the host clock when no zone is given.
    """
    if not tz_name:
        return datetime.now()
    return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)


def hours_between(start: datetime, end: datetime) -> float:
    """Elapsed hours between two timestamps, rounded to 2 decimals."""
    return round((end - start).total_seconds() / 3600, 2)
