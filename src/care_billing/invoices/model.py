from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..contacts.model import CarerContact, ClientContact


@dataclass(frozen=True)
class InvoiceLine:
    """One billed shift as it appears on an invoice."""

    shift_id: int
    shift_date: date
    day_of_week: str
    time_from: datetime
    time_to: datetime
    description: str
    code: str
    hours: float
    unit_price: Optional[float]
    amount: Optional[float]

    def as_dict(self) -> dict:
        return {
            "shift_id": self.shift_id,
            "date": self.shift_date.strftime("%Y-%m-%d"),
            "day": self.day_of_week,
            "time_from": self.time_from.strftime("%I:%M %p"),
            "time_to": self.time_to.strftime("%I:%M %p"),
            "description": self.description,
            "code": self.code,
            "hours": self.hours,
            "unit_price": self.unit_price,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class InvoicePreview:
    invoice_number: str
    invoice_date: date
    due_date: date
    date_from: date
    date_to: date
    carer_ids: tuple[int, ...]
    client_id: int
    carer: CarerContact
    client: ClientContact
    lines: tuple[InvoiceLine, ...] = field(default_factory=tuple)
    total: float = 0.0

    def as_dict(self) -> dict:
        return {
            "invoice_number": self.invoice_number,
            "invoice_date": self.invoice_date.strftime("%Y-%m-%d"),
            "due_date": self.due_date.strftime("%Y-%m-%d"),
            "date_from": self.date_from.strftime("%Y-%m-%d"),
            "date_to": self.date_to.strftime("%Y-%m-%d"),
            "carer_ids": list(self.carer_ids),
            "client_id": self.client_id,
            "carer": self.carer.as_dict(),
            "client": self.client.as_dict(),
            "lines": [line.as_dict() for line in self.lines],
            "total": self.total,
        }
