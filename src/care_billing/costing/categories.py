from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.constants import MANUAL_ENTRY_CATEGORY
from ..core.exceptions import InvalidInput


@dataclass(frozen=True)
class RateCardCategory:
    """Category priced from its rate card line items."""

    name: str


@dataclass(frozen=True)
class ManualEntryCategory:
    """Category with no rate card; the caller supplies a flat cost."""

    name: str = MANUAL_ENTRY_CATEGORY


Category = Union[RateCardCategory, ManualEntryCategory]


def parse_category(value: Union[str, Category, None]) -> Category:
    if isinstance(value, (RateCardCategory, ManualEntryCategory)):
        return value

    if value is not None and not isinstance(value, str):
        raise InvalidInput(f"Invalid category: {value!r}")
    name = (value or "").strip()
    if not name:
        raise InvalidInput("Category is required")
    if name == MANUAL_ENTRY_CATEGORY:
        return ManualEntryCategory()
    return RateCardCategory(name)


def is_manual_entry(value: Union[str, Category, None]) -> bool:
    if isinstance(value, ManualEntryCategory):
        return True
    if isinstance(value, RateCardCategory):
        return False
    return isinstance(value, str) and value.strip() == MANUAL_ENTRY_CATEGORY
