from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...line_items.model import RateCardLineItem
from ..categories import Category
from ..model import CostAllocation, ShiftInterval


class CostingStrategy(ABC):
    """Strategy Pattern: encapsulate how one kind of category is priced."""

    @abstractmethod
    def allocate(
        self,
        *,
        shift: ShiftInterval,
        category: Category,
        manual_cost: Optional[object],
        line_items: Sequence[RateCardLineItem],
    ) -> CostAllocation:
        raise NotImplementedError
