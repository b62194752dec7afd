from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import hours_between
from ..core.exceptions import ValidationError
from ..costing.categories import is_manual_entry
from ..line_items.repository import LineItemRepository
from ..shifts.model import ShiftReportRow
from ..shifts.repository import ShiftRepository


@dataclass(frozen=True)
class ShiftReport:
    carers: list[dict]
    line_items: list[dict]
    categories: list[dict]
    total_hours: float
    total_cost: float


class _Bucket:
    def __init__(self):
        self.hours = 0.0
        self.cost = 0.0
        self.monthly: dict[str, list[float]] = {}

    def add(self, *, month: str, hours: float, cost: float) -> None:
        self.hours += hours
        self.cost += cost
        m = self.monthly.setdefault(month, [0.0, 0.0])
        m[0] += hours
        m[1] += cost

    def monthly_rounded(self) -> dict[str, dict]:
        return {k: {"hours": round(v[0], 2), "cost": round(v[1], 2)} for k, v in sorted(self.monthly.items())}


class ShiftReportService:
    """Hours/cost summaries per carer, per line item and per category."""

    def __init__(self, shifts: ShiftRepository, line_items: LineItemRepository):
        self._shifts = shifts
        self._line_items = line_items

    def build_report(
        self,
        *,
        start: date,
        end: date,
        carer_id: Optional[int] = None,
        manual_entry_code: Optional[str] = None,
    ) -> ShiftReport:
        if end < start:
            raise ValidationError("End date cannot be before start date")

        mapped_item = None
        if manual_entry_code:
            mapped_item = self._line_items.get_by_code(manual_entry_code)
            if not mapped_item:
                raise ValidationError(f"Line item code {manual_entry_code!r} not found")

        rows = self._shifts.get_report_rows(
            start_date=start,
            end_date=end,
            carer_ids=[int(carer_id)] if carer_id else None,
        )

        carers: dict[int, tuple[str, _Bucket]] = {}
        line_items: dict[str, dict] = {}
        categories: dict[str, _Bucket] = {}
        total_hours = 0.0
        total_cost = 0.0

        for r in rows:
            hours = hours_between(r.time_from, r.time_to)
            cost = r.cost or 0.0
            month = f"{r.shift_date.year}-{r.shift_date.month:02d}"
            total_hours += hours
            total_cost += cost

            _, carer_bucket = carers.setdefault(r.carer_id, (r.carer_name, _Bucket()))
            carer_bucket.add(month=month, hours=hours, cost=cost)

            item = self._line_item_for(r, mapped_item)
            if item is None:
                continue

            key, code, description, category = item
            entry = line_items.setdefault(
                key,
                {"category": category, "code": code, "description": description, "hours": 0.0, "cost": 0.0},
            )
            entry["hours"] += hours
            entry["cost"] += cost
            categories.setdefault(category, _Bucket()).add(month=month, hours=hours, cost=cost)

        carer_rows = [
            {
                "carer_id": cid,
                "carer_name": name,
                "hours": round(bucket.hours, 2),
                "cost": round(bucket.cost, 2),
                "monthly": bucket.monthly_rounded(),
            }
            for cid, (name, bucket) in carers.items()
        ]
        carer_rows.sort(key=lambda x: x["carer_name"])

        item_rows = [{**v, "hours": round(v["hours"], 2), "cost": round(v["cost"], 2)} for v in line_items.values()]
        item_rows.sort(key=lambda x: (x["category"], -x["hours"]))

        category_rows = [
            {
                "category": name,
                "hours": round(bucket.hours, 2),
                "cost": round(bucket.cost, 2),
                "monthly": bucket.monthly_rounded(),
            }
            for name, bucket in categories.items()
        ]
        category_rows.sort(key=lambda x: -x["cost"])

        return ShiftReport(
            carers=carer_rows,
            line_items=item_rows,
            categories=category_rows,
            total_hours=round(total_hours, 2),
            total_cost=round(total_cost, 2),
        )

    @staticmethod
    def _line_item_for(r: ShiftReportRow, mapped_item) -> Optional[tuple[str, str, str, str]]:
        """(key, code, description, category) the shift is reported under, if any.

        Manual-entry shifts have no line item of their own; they are reported
        under ``mapped_item`` when one was chosen and skipped otherwise.
        """
        if is_manual_entry(r.category):
            if mapped_item is None:
                return None
            return (
                f"id:{mapped_item.line_item_id}" if mapped_item.line_item_id is not None else f"code:{mapped_item.code}",
                mapped_item.code or "",
                mapped_item.description or "",
                mapped_item.category or r.category or "Uncategorized",
            )

        if r.line_item_id is None:
            return None
        return (
            f"id:{r.line_item_id}",
            r.line_item_code or str(r.line_item_id),
            r.line_item_description or "",
            r.line_item_category or r.category or "Uncategorized",
        )
