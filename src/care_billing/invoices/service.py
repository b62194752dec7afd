from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import hours_between
from ..common.validators import require_non_empty, require_positive_id
from ..contacts.repository import ContactRepository
from ..core.constants import INVOICE_DUE_DAYS
from ..core.exceptions import ValidationError
from ..costing.categories import is_manual_entry
from ..shifts.model import ShiftReportRow
from ..shifts.repository import ShiftRepository
from .model import InvoiceLine, InvoicePreview

logger = logging.getLogger(__name__)


class InvoiceService:
    """Invoice figures for a client's shifts; rendering is left to the caller."""

    def __init__(self, shifts: ShiftRepository, contacts: ContactRepository):
        self._shifts = shifts
        self._contacts = contacts

    def build_invoice(
        self,
        *,
        carer_ids: Sequence[int],
        client_id: int,
        invoice_number: str,
        invoice_date: date,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> InvoicePreview:
        if not carer_ids:
            raise ValidationError("Carer is required")
        carer_ids = tuple(require_positive_id(c, "Carer") for c in carer_ids)
        client_id = require_positive_id(client_id, "Client")
        invoice_number = require_non_empty(invoice_number, "Invoice number")

        date_from = date_from or invoice_date
        date_to = date_to or invoice_date
        if date_to < date_from:
            raise ValidationError("End date cannot be before start date")

        carers = {c.carer_id: c for c in self._contacts.get_carers(list(carer_ids))}
        # The first selected carer issues the invoice.
        carer = carers.get(carer_ids[0])
        if carer is None:
            raise ValidationError("Carer not found")
        client = self._contacts.get_client(client_id)
        if client is None:
            raise ValidationError("Client not found")

        rows = self._shifts.get_report_rows(
            start_date=date_from,
            end_date=date_to,
            carer_ids=list(carer_ids),
            client_id=client_id,
        )
        billable = [r for r in rows if not is_manual_entry(r.category)]
        billable.sort(key=lambda r: (r.shift_date, r.time_from))

        lines = [self._to_line(r) for r in billable]
        total = round(sum((line.amount or 0.0 for line in lines), 0.0), 2)
        logger.info(
            "Invoice %s: %d line(s) for client %s, total %.2f", invoice_number, len(lines), client_id, total
        )

        return InvoicePreview(
            invoice_number=invoice_number,
            invoice_date=invoice_date,
            due_date=invoice_date + timedelta(days=INVOICE_DUE_DAYS),
            date_from=date_from,
            date_to=date_to,
            carer_ids=carer_ids,
            client_id=client_id,
            carer=carer,
            client=client,
            lines=tuple(lines),
            total=total,
        )

    @staticmethod
    def _to_line(r: ShiftReportRow) -> InvoiceLine:
        hours = hours_between(r.time_from, r.time_to)
        rate = r.billed_rate
        if r.cost is not None:
            amount = r.cost
        elif rate is not None:
            amount = rate * hours
        else:
            amount = None

        return InvoiceLine(
            shift_id=r.shift_id,
            shift_date=r.shift_date,
            day_of_week=r.shift_date.strftime("%a"),
            time_from=r.time_from,
            time_to=r.time_to,
            description=r.line_item_description or "",
            code=r.line_item_code or "",
            hours=round(hours, 2),
            unit_price=round(rate, 2) if rate is not None else None,
            amount=round(amount, 2) if amount is not None else None,
        )
