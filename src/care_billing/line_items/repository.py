from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import RateCardLineItem


class LineItemRepository(Protocol):
    def list_for_category(self, category: str) -> Sequence[RateCardLineItem]:
        """Rate card rows of one category, ordered by code."""

        raise NotImplementedError

    def list_categories(self) -> Sequence[str]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[RateCardLineItem]:
        raise NotImplementedError
