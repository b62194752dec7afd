from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.constants import MINUTES_PER_DAY
from ..core.enums import DayType
from ..core.exceptions import InvalidInput


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not isinstance(value, str):
        raise InvalidInput(f"Invalid date (YYYY-MM-DD): {value!r}")
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidInput(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: Optional[str]) -> Optional[time]:
    """Parse a 24-hour HH:MM string; blank values mean "not set"."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidInput(f"Invalid time (HH:MM): {value!r}")
    v = value.strip()
    if not v:
        return None
    try:
        return datetime.strptime(v, "%H:%M").time()
    except ValueError:
        raise InvalidInput(f"Invalid time (HH:MM): {value!r}")


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def shift_duration_minutes(start: time, end: time) -> int:
    """Length of a shift; an end at or before the start rolls past midnight."""
    start_min = minutes_of_day(start)
    end_min = minutes_of_day(end)
    if end_min <= start_min:
        end_min += MINUTES_PER_DAY
    return end_min - start_min


def day_type_for(value: date) -> DayType:
    weekday = value.weekday()
    if weekday == 5:
        return DayType.SATURDAY
    if weekday == 6:
        return DayType.SUNDAY
    return DayType.WEEKDAY


def hours_between(start: datetime, end: datetime) -> float:
    """Elapsed hours between two timestamps, never below 0."""
    hours = (end - start).total_seconds() / 3600
    return max(hours, 0.0)
