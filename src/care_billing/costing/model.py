from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import parse_hhmm, parse_iso_date, shift_duration_minutes


@dataclass(frozen=True)
class ShiftInterval:
    """The period being priced: a calendar date plus start/end time-of-day."""

    shift_date: date
    start_time: Optional[time]
    end_time: Optional[time]

    @classmethod
    def parse(
        cls,
        shift_date: str | date,
        start_time: str | time | None,
        end_time: str | time | None,
    ) -> "ShiftInterval":
        """Build from form values (YYYY-MM-DD, HH:MM); parsed values pass through."""
        if not isinstance(shift_date, date):
            shift_date = parse_iso_date(shift_date)
        if not isinstance(start_time, time):
            start_time = parse_hhmm(start_time)
        if not isinstance(end_time, time):
            end_time = parse_hhmm(end_time)
        return cls(shift_date=shift_date, start_time=start_time, end_time=end_time)

    @property
    def crosses_midnight(self) -> bool:
        if self.start_time is None or self.end_time is None:
            return False
        return (self.end_time.hour, self.end_time.minute) <= (self.start_time.hour, self.start_time.minute)

    @property
    def duration_minutes(self) -> Optional[int]:
        if self.start_time is None or self.end_time is None:
            return None
        return shift_duration_minutes(self.start_time, self.end_time)


@dataclass(frozen=True)
class CostBreakdownLine:
    description: str
    code: str
    rate: float
    hours: float
    cost: float

    def as_dict(self) -> dict:
        return {
            "description": self.description,
            "code": self.code,
            "rate": self.rate,
            "hours": self.hours,
            "cost": self.cost,
        }


@dataclass(frozen=True)
class CostAllocation:
    """Priced shift: ordered breakdown lines and their total.

    ``uncovered_minutes`` is the part of the shift no line item covered; it is
    reported but never billed.
    """

    breakdown: tuple[CostBreakdownLine, ...] = field(default_factory=tuple)
    total: float = 0.0
    uncovered_minutes: int = 0

    @classmethod
    def from_lines(cls, lines: list[CostBreakdownLine], *, uncovered_minutes: int = 0) -> "CostAllocation":
        total = sum((line.cost for line in lines), 0.0)
        return cls(breakdown=tuple(lines), total=total, uncovered_minutes=uncovered_minutes)

    def as_dict(self) -> dict:
        return {
            "breakdown": [line.as_dict() for line in self.breakdown],
            "total": self.total,
            "uncovered_minutes": self.uncovered_minutes,
        }
