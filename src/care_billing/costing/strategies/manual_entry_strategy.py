from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional, Sequence

from ...core.constants import MANUAL_ENTRY_CATEGORY, MANUAL_ENTRY_DESCRIPTION
from ...core.exceptions import InvalidInput
from ...line_items.model import RateCardLineItem
from ..categories import Category
from ..model import CostAllocation, CostBreakdownLine, ShiftInterval
from .base import CostingStrategy


def validate_manual_cost(value: Optional[object]) -> float:
    """Flat cost must be a positive finite number."""
    if value is None:
        raise InvalidInput(f"A cost is required for {MANUAL_ENTRY_CATEGORY} shifts")
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidInput(f"Cost must be a number, got {value!r}")

    cost = float(value)
    if not math.isfinite(cost) or cost <= 0:
        raise InvalidInput(f"Cost must be greater than 0, got {value!r}")
    return cost


class ManualEntryStrategy(CostingStrategy):
    """Rate card is bypassed; the whole shift is billed at the supplied cost."""

    def allocate(
        self,
        *,
        shift: ShiftInterval,
        category: Category,
        manual_cost: Optional[object],
        line_items: Sequence[RateCardLineItem],
    ) -> CostAllocation:
        cost = validate_manual_cost(manual_cost)
        line = CostBreakdownLine(
            description=MANUAL_ENTRY_DESCRIPTION,
            code=MANUAL_ENTRY_CATEGORY,
            rate=cost,
            hours=0,
            cost=cost,
        )
        return CostAllocation.from_lines([line])
