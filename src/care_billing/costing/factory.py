from __future__ import annotations

from dataclasses import dataclass

from .categories import Category, ManualEntryCategory, RateCardCategory
from .strategies.base import CostingStrategy
from .strategies.manual_entry_strategy import ManualEntryStrategy
from .strategies.rate_card_strategy import RateCardStrategy


@dataclass
class CostingStrategyFactory:
    """Factory Pattern: choose the pricing strategy for a category."""

    def for_category(self, category: Category) -> CostingStrategy:
        if isinstance(category, ManualEntryCategory):
            return ManualEntryStrategy()
        if isinstance(category, RateCardCategory):
            return RateCardStrategy()
        raise TypeError(f"Unsupported category: {category!r}")
