from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class ShiftRecord:
    """Domain entity: a scheduled shift with its computed cost."""

    shift_id: int
    shift_date: date
    time_from: datetime
    time_to: datetime
    carer_id: int
    category: str
    cost: float
    client_id: Optional[int] = None
    line_item_id: Optional[int] = None


@dataclass(frozen=True)
class ShiftReportRow:
    """Read-model for reports/invoices (shift joined with carer and line item)."""

    shift_id: int
    shift_date: date
    time_from: datetime
    time_to: datetime
    carer_id: int
    carer_name: str
    category: Optional[str]
    cost: Optional[float]
    client_id: Optional[int] = None
    line_item_id: Optional[int] = None
    line_item_code: Optional[str] = None
    line_item_description: Optional[str] = None
    line_item_category: Optional[str] = None
    billed_rate: Optional[float] = None
