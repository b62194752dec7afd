from .allocator import allocate
from .categories import Category, ManualEntryCategory, RateCardCategory, parse_category
from .model import CostAllocation, CostBreakdownLine, ShiftInterval

__all__ = [
    "allocate",
    "Category",
    "CostAllocation",
    "CostBreakdownLine",
    "ManualEntryCategory",
    "RateCardCategory",
    "ShiftInterval",
    "parse_category",
]
