from __future__ import annotations

from datetime import date, time

import pytest

from care_billing.core.exceptions import ValidationError
from care_billing.invoices.service import InvoiceService


def test_invoice_lines_sorted_and_totalled(shifts_repo, contacts_repo, make_row):
    shifts_repo.report_rows = [
        make_row(2, shift_date=date(2025, 1, 9), start=time(9, 0), end=time(11, 0), cost=171.0),
        make_row(1, shift_date=date(2025, 1, 8), start=time(13, 0), end=time(14, 30), cost=None),
        make_row(3, shift_date=date(2025, 1, 8), start=time(9, 0), end=time(12, 0), category="HIREUP", cost=150.0, line_item_id=None),
    ]

    invoice = InvoiceService(shifts_repo, contacts_repo).build_invoice(
        carer_ids=[1],
        client_id=10,
        invoice_number="INV-001",
        invoice_date=date(2025, 1, 10),
        date_from=date(2025, 1, 1),
        date_to=date(2025, 1, 31),
    )

    assert [line.shift_id for line in invoice.lines] == [1, 2]
    first = invoice.lines[0]
    assert first.day_of_week == "Wed"
    assert first.hours == 1.5
    assert first.unit_price == 85.5
    # No stored cost: rate x hours.
    assert first.amount == pytest.approx(128.25)
    assert invoice.total == pytest.approx(299.25)
    assert invoice.due_date == date(2025, 1, 17)
    assert shifts_repo.last_report_args["client_id"] == 10


def test_invoice_range_defaults_to_invoice_date(shifts_repo, contacts_repo):
    invoice = InvoiceService(shifts_repo, contacts_repo).build_invoice(
        carer_ids=[1], client_id=10, invoice_number="INV-002", invoice_date=date(2025, 3, 1)
    )

    assert invoice.date_from == invoice.date_to == date(2025, 3, 1)
    assert invoice.lines == ()
    assert invoice.total == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"carer_ids": []},
        {"client_id": 0},
        {"invoice_number": " "},
        {"date_from": date(2025, 2, 1), "date_to": date(2025, 1, 1)},
    ],
)
def test_invoice_requires_carer_client_and_number(shifts_repo, contacts_repo, overrides):
    fields = {"carer_ids": [1], "client_id": 10, "invoice_number": "INV-003", "invoice_date": date(2025, 1, 10)}
    fields.update(overrides)

    with pytest.raises(ValidationError):
        InvoiceService(shifts_repo, contacts_repo).build_invoice(**fields)


def test_invoice_carries_carer_and_client_details(shifts_repo, contacts_repo):
    invoice = InvoiceService(shifts_repo, contacts_repo).build_invoice(
        carer_ids=[1], client_id=10, invoice_number="INV-004", invoice_date=date(2025, 1, 10)
    )

    data = invoice.as_dict()
    assert data["carer"] == {
        "carer_id": 1,
        "name": "Alex Carer",
        "address": "1 Main St, Sydney NSW 2000",
        "mobile": "0400 000 000",
        "email": "alex@example.com",
        "abn": "12 345 678 901",
        "account_name": "",
        "bsb": "",
        "account_number": "",
    }
    assert data["client"] == {
        "client_id": 10,
        "name": "Sam Client",
        "ndis_number": "430000000",
        "address_line1": "5 River Rd",
        "address_line2": "Parramatta NSW 2150",
    }


@pytest.mark.parametrize(
    "carer_ids, client_id, message",
    [
        ([99], 10, "Carer not found"),
        ([1], 99, "Client not found"),
    ],
)
def test_invoice_unknown_carer_or_client(shifts_repo, contacts_repo, carer_ids, client_id, message):
    with pytest.raises(ValidationError, match=message):
        InvoiceService(shifts_repo, contacts_repo).build_invoice(
            carer_ids=carer_ids, client_id=client_id, invoice_number="INV-005", invoice_date=date(2025, 1, 10)
        )
