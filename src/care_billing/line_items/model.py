from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..common.datetime_utils import minutes_of_day
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import DayType


@dataclass(frozen=True)
class RateCardLineItem:
    """Domain entity: a billing rule priced per hour.

    A null ``time_from`` starts the window at 00:00 and a null ``time_to``
    ends it at 24:00. A window whose end is at or before its start runs past
    midnight into the next day.
    """

    category: str
    billed_rate: Optional[float] = None
    time_from: Optional[time] = None
    time_to: Optional[time] = None
    weekday: bool = False
    saturday: bool = False
    sunday: bool = False
    sleepover: bool = False
    description: Optional[str] = None
    code: Optional[str] = None
    line_item_id: Optional[int] = None

    def applies_to(self, day_type: DayType) -> bool:
        if day_type == DayType.WEEKDAY:
            return bool(self.weekday)
        if day_type == DayType.SATURDAY:
            return bool(self.saturday)
        return bool(self.sunday)

    @property
    def start_minute(self) -> int:
        return minutes_of_day(self.time_from) if self.time_from else 0

    def window_minutes(self) -> tuple[int, int]:
        """Half-open [start, end) window in minutes from midnight."""
        start = self.start_minute
        if self.time_to is None:
            return start, MINUTES_PER_DAY
        end = minutes_of_day(self.time_to)
        if end <= start:
            end += MINUTES_PER_DAY
        return start, end

    @property
    def display_description(self) -> str:
        return self.description or f"{self.category} - {self.code}"

    @property
    def display_code(self) -> str:
        return self.code or ""

    @property
    def rate(self) -> float:
        return float(self.billed_rate or 0)
