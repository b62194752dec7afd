from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Day-of-week classes a rate card line item can apply to."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
