from __future__ import annotations

from typing import Optional, Sequence, Union

from ..line_items.model import RateCardLineItem
from .categories import Category, parse_category
from .factory import CostingStrategyFactory
from .model import CostAllocation, ShiftInterval


def allocate(
    shift: ShiftInterval,
    category: Union[str, Category],
    manual_cost: Optional[object] = None,
    line_items: Sequence[RateCardLineItem] = (),
    *,
    factory: Optional[CostingStrategyFactory] = None,
) -> CostAllocation:
    """Price ``shift`` for ``category``.

    Rate card categories walk the matching line items (sleepover first, then by
    window start) and give each the minutes it overlaps, until the shift is
    used up. Minutes left over are not billed. The manual-entry category
    ignores ``line_items`` and bills ``manual_cost`` as a single line.

    Pure: no I/O, same inputs give the same result. Raises ``InvalidInput``
    for an empty category or an unusable manual cost.
    """
    parsed = parse_category(category)
    strategy = (factory or CostingStrategyFactory()).for_category(parsed)
    return strategy.allocate(shift=shift, category=parsed, manual_cost=manual_cost, line_items=list(line_items))
