from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import ShiftRecord, ShiftReportRow


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: int) -> Optional[ShiftRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        shift_date: date,
        time_from: datetime,
        time_to: datetime,
        carer_id: int,
        category: str,
        cost: float,
        client_id: Optional[int] = None,
        line_item_id: Optional[int] = None,
    ) -> int:
        """Insert a shift. Returns shift_id."""

        raise NotImplementedError

    def update(
        self,
        *,
        shift_id: int,
        shift_date: date,
        time_from: datetime,
        time_to: datetime,
        carer_id: int,
        category: str,
        cost: float,
        client_id: Optional[int] = None,
        line_item_id: Optional[int] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, *, shift_id: int) -> bool:
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        carer_ids: Optional[Sequence[int]] = None,
        client_id: Optional[int] = None,
    ) -> Sequence[ShiftReportRow]:
        """Shifts dated within [start_date, end_date], oldest first."""

        raise NotImplementedError
