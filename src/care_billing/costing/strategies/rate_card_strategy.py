from __future__ import annotations

from typing import Optional, Sequence

from ...common.datetime_utils import day_type_for, minutes_of_day
from ...core.constants import MINUTES_PER_DAY
from ...line_items.model import RateCardLineItem
from ..categories import Category
from ..model import CostAllocation, CostBreakdownLine, ShiftInterval
from .base import CostingStrategy


def overlap_minutes(shift_start: int, shift_end: int, window: tuple[int, int]) -> int:
    """Minutes of [shift_start, shift_end) covered by any daily repeat of ``window``.

    Both are measured from midnight of the shift date; the shift may run past
    1440 and a window may start the day before.
    """
    window_start, window_end = window
    total = 0
    for day in range(shift_start // MINUTES_PER_DAY - 1, shift_end // MINUTES_PER_DAY + 1):
        offset = day * MINUTES_PER_DAY
        lo = max(shift_start, offset + window_start)
        hi = min(shift_end, offset + window_end)
        if hi > lo:
            total += hi - lo
    return total


def _priority(item: RateCardLineItem) -> tuple[int, int]:
    # Sleepover first, in input order; others by window start.
    if item.sleepover:
        return 0, 0
    return 1, item.start_minute


class RateCardStrategy(CostingStrategy):
    """Apportion the shift across the category's line items for that day."""

    def allocate(
        self,
        *,
        shift: ShiftInterval,
        category: Category,
        manual_cost: Optional[object],
        line_items: Sequence[RateCardLineItem],
    ) -> CostAllocation:
        total_minutes = shift.duration_minutes
        if total_minutes is None:
            return CostAllocation()

        day_type = day_type_for(shift.shift_date)
        candidates = [li for li in line_items if li.category == category.name and li.applies_to(day_type)]
        candidates.sort(key=_priority)

        shift_start = minutes_of_day(shift.start_time)
        shift_end = shift_start + total_minutes
        remaining = total_minutes
        lines: list[CostBreakdownLine] = []

        for item in candidates:
            if remaining <= 0:
                break

            minutes = min(overlap_minutes(shift_start, shift_end, item.window_minutes()), remaining)
            if minutes <= 0:
                continue

            hours = minutes / 60
            rate = item.rate
            lines.append(
                CostBreakdownLine(
                    description=item.display_description,
                    code=item.display_code,
                    rate=rate,
                    hours=hours,
                    cost=hours * rate,
                )
            )
            remaining -= minutes

        return CostAllocation.from_lines(lines, uncovered_minutes=remaining)
