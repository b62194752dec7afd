from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..common.validators import require_positive_id
from ..core.exceptions import ValidationError
from ..costing.allocator import allocate
from ..costing.categories import Category, ManualEntryCategory, parse_category
from ..costing.factory import CostingStrategyFactory
from ..costing.model import CostAllocation, ShiftInterval
from ..line_items.repository import LineItemRepository
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedShift:
    shift_id: int
    cost: float
    allocation: CostAllocation


@dataclass(frozen=True)
class _PricedShift:
    interval: ShiftInterval
    category: Category
    allocation: CostAllocation
    line_item_id: Optional[int]


class ShiftService:
    def __init__(
        self,
        shifts: ShiftRepository,
        line_items: LineItemRepository,
        *,
        strategy_factory: Optional[CostingStrategyFactory] = None,
    ):
        self._shifts = shifts
        self._line_items = line_items
        self._factory = strategy_factory or CostingStrategyFactory()

    def quote(
        self,
        *,
        shift_date: str | date,
        start_time: str | time | None,
        end_time: str | time | None,
        category: str,
        manual_cost: Optional[object] = None,
    ) -> CostAllocation:
        """Cost breakdown for a prospective shift; nothing is stored."""
        interval = ShiftInterval.parse(shift_date, start_time, end_time)
        parsed = parse_category(category)

        items = [] if isinstance(parsed, ManualEntryCategory) else self._line_items.list_for_category(parsed.name)
        allocation = allocate(interval, parsed, manual_cost, items, factory=self._factory)
        self._warn_uncovered(interval, parsed, allocation)
        return allocation

    def create(
        self,
        *,
        shift_date: str | date,
        start_time: str | time | None,
        end_time: str | time | None,
        carer_id: int,
        category: str,
        client_id: Optional[int] = None,
        manual_cost: Optional[object] = None,
    ) -> SavedShift:
        carer_id = require_positive_id(carer_id, "Carer")
        priced = self._price(
            shift_date=shift_date,
            start_time=start_time,
            end_time=end_time,
            category=category,
            manual_cost=manual_cost,
        )
        time_from, time_to = self._timestamps(priced.interval)

        shift_id = self._shifts.create(
            shift_date=priced.interval.shift_date,
            time_from=time_from,
            time_to=time_to,
            carer_id=carer_id,
            client_id=require_positive_id(client_id, "Client") if client_id else None,
            category=priced.category.name,
            line_item_id=priced.line_item_id,
            cost=priced.allocation.total,
        )
        logger.info(
            "Created shift %s for carer %s (%s, %.2f)", shift_id, carer_id, priced.category.name, priced.allocation.total
        )
        return SavedShift(shift_id=shift_id, cost=priced.allocation.total, allocation=priced.allocation)

    def update(
        self,
        *,
        shift_id: int,
        shift_date: str | date,
        start_time: str | time | None,
        end_time: str | time | None,
        carer_id: int,
        category: str,
        client_id: Optional[int] = None,
        manual_cost: Optional[object] = None,
    ) -> SavedShift:
        shift_id = require_positive_id(shift_id, "Shift")
        carer_id = require_positive_id(carer_id, "Carer")
        if not self._shifts.get_by_id(shift_id):
            raise ValidationError("Shift not found")

        priced = self._price(
            shift_date=shift_date,
            start_time=start_time,
            end_time=end_time,
            category=category,
            manual_cost=manual_cost,
        )
        time_from, time_to = self._timestamps(priced.interval)

        ok = self._shifts.update(
            shift_id=shift_id,
            shift_date=priced.interval.shift_date,
            time_from=time_from,
            time_to=time_to,
            carer_id=carer_id,
            client_id=require_positive_id(client_id, "Client") if client_id else None,
            category=priced.category.name,
            line_item_id=priced.line_item_id,
            cost=priced.allocation.total,
        )
        if not ok:
            raise ValidationError("Failed to update shift")

        logger.info("Updated shift %s (%s, %.2f)", shift_id, priced.category.name, priced.allocation.total)
        return SavedShift(shift_id=shift_id, cost=priced.allocation.total, allocation=priced.allocation)

    def delete(self, *, shift_id: int) -> None:
        if not self._shifts.delete(shift_id=require_positive_id(shift_id, "Shift")):
            raise ValidationError("Failed to delete shift")
        logger.info("Deleted shift %s", shift_id)

    def _price(
        self,
        *,
        shift_date: str | date,
        start_time: str | time | None,
        end_time: str | time | None,
        category: str,
        manual_cost: Optional[object],
    ) -> _PricedShift:
        interval = ShiftInterval.parse(shift_date, start_time, end_time)
        if interval.start_time is None or interval.end_time is None:
            raise ValidationError("Start and end time are required")

        parsed = parse_category(category)
        if isinstance(parsed, ManualEntryCategory):
            items = []
            line_item_id = None
        else:
            items = list(self._line_items.list_for_category(parsed.name))
            if not items:
                raise ValidationError("Selected category not found")
            line_item_id = items[0].line_item_id

        allocation = allocate(interval, parsed, manual_cost, items, factory=self._factory)
        self._warn_uncovered(interval, parsed, allocation)
        return _PricedShift(interval=interval, category=parsed, allocation=allocation, line_item_id=line_item_id)

    @staticmethod
    def _timestamps(interval: ShiftInterval) -> tuple[datetime, datetime]:
        time_from = datetime.combine(interval.shift_date, interval.start_time)
        end_date = interval.shift_date + timedelta(days=1) if interval.crosses_midnight else interval.shift_date
        return time_from, datetime.combine(end_date, interval.end_time)

    @staticmethod
    def _warn_uncovered(interval: ShiftInterval, category: Category, allocation: CostAllocation) -> None:
        # Uncovered time stays unbilled; surfaced here only.
        if allocation.uncovered_minutes > 0:
            logger.warning(
                "%d minute(s) of the %s shift on %s are not covered by any line item and were not billed",
                allocation.uncovered_minutes,
                category.name,
                interval.shift_date.isoformat(),
            )
