from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional, Sequence

import pytest

from care_billing.contacts.model import CarerContact, ClientContact
from care_billing.line_items.model import RateCardLineItem
from care_billing.shifts.model import ShiftRecord, ShiftReportRow


class InMemoryLineItems:
    def __init__(self, items: Optional[list[RateCardLineItem]] = None):
        self.items: list[RateCardLineItem] = list(items or [])

    def list_for_category(self, category: str) -> Sequence[RateCardLineItem]:
        found = [li for li in self.items if li.category == category]
        return sorted(found, key=lambda li: li.code or "")

    def list_categories(self) -> Sequence[str]:
        return sorted({li.category for li in self.items})

    def get_by_code(self, code: str) -> Optional[RateCardLineItem]:
        for li in self.items:
            if li.code == code:
                return li
        return None


class InMemoryShifts:
    def __init__(self):
        self.records: dict[int, ShiftRecord] = {}
        self.report_rows: list[ShiftReportRow] = []
        self.last_report_args: Optional[dict] = None
        self._id = 0

    def get_by_id(self, shift_id: int) -> Optional[ShiftRecord]:
        return self.records.get(int(shift_id))

    def create(self, **fields) -> int:
        self._id += 1
        self.records[self._id] = ShiftRecord(shift_id=self._id, **fields)
        return self._id

    def update(self, *, shift_id: int, **fields) -> bool:
        if shift_id not in self.records:
            return False
        self.records[shift_id] = replace(self.records[shift_id], **fields)
        return True

    def delete(self, *, shift_id: int) -> bool:
        return self.records.pop(int(shift_id), None) is not None

    def get_report_rows(self, *, start_date: date, end_date: date, carer_ids=None, client_id=None):
        self.last_report_args = {
            "start_date": start_date,
            "end_date": end_date,
            "carer_ids": carer_ids,
            "client_id": client_id,
        }
        rows = [r for r in self.report_rows if start_date <= r.shift_date <= end_date]
        if carer_ids:
            rows = [r for r in rows if r.carer_id in carer_ids]
        if client_id is not None:
            rows = [r for r in rows if r.client_id == client_id]
        return rows


class InMemoryContacts:
    def __init__(self, carers=None, clients=None):
        self.carers: dict[int, CarerContact] = {c.carer_id: c for c in carers or []}
        self.clients: dict[int, ClientContact] = {c.client_id: c for c in clients or []}

    def get_carers(self, carer_ids: Sequence[int]) -> Sequence[CarerContact]:
        return [self.carers[c] for c in carer_ids if c in self.carers]

    def get_client(self, client_id: int) -> Optional[ClientContact]:
        return self.clients.get(int(client_id))


def personal_care_rate_card() -> list[RateCardLineItem]:
    return [
        RateCardLineItem(
            line_item_id=1,
            code="PC-DAY",
            category="Personal Care",
            description="Weekday Daytime",
            billed_rate=85.50,
            time_from=time(6, 0),
            time_to=time(22, 0),
            weekday=True,
        ),
        RateCardLineItem(
            line_item_id=2,
            code="PC-NIGHT",
            category="Personal Care",
            description="Weekday Night",
            billed_rate=95.00,
            time_from=time(22, 0),
            time_to=time(6, 0),
            weekday=True,
        ),
        RateCardLineItem(
            line_item_id=3,
            code="PC-SAT",
            category="Personal Care",
            description="Saturday",
            billed_rate=120.00,
            saturday=True,
        ),
    ]


def report_row(
    shift_id: int,
    *,
    shift_date: date,
    start: time,
    end: time,
    carer_id: int = 1,
    carer_name: str = "Alex Carer",
    category: str = "Personal Care",
    cost: Optional[float] = None,
    client_id: Optional[int] = 10,
    line_item_id: Optional[int] = 1,
    code: Optional[str] = "PC-DAY",
    description: Optional[str] = "Weekday Daytime",
    billed_rate: Optional[float] = 85.50,
    end_date: Optional[date] = None,
) -> ShiftReportRow:
    return ShiftReportRow(
        shift_id=shift_id,
        shift_date=shift_date,
        time_from=datetime.combine(shift_date, start),
        time_to=datetime.combine(end_date or shift_date, end),
        carer_id=carer_id,
        carer_name=carer_name,
        category=category,
        cost=cost,
        client_id=client_id,
        line_item_id=line_item_id,
        line_item_code=code,
        line_item_description=description,
        line_item_category=category if line_item_id else None,
        billed_rate=billed_rate,
    )


@pytest.fixture
def line_items_repo() -> InMemoryLineItems:
    return InMemoryLineItems(personal_care_rate_card())


@pytest.fixture
def shifts_repo() -> InMemoryShifts:
    return InMemoryShifts()


@pytest.fixture
def contacts_repo() -> InMemoryContacts:
    return InMemoryContacts(
        carers=[
            CarerContact(
                carer_id=1,
                first_name="Alex",
                last_name="Carer",
                email="alex@example.com",
                phone_number="0400 000 000",
                address="1 Main St, Sydney NSW 2000",
                abn="12 345 678 901",
            )
        ],
        clients=[
            ClientContact(
                client_id=10,
                first_name="Sam",
                last_name="Client",
                ndis_number="430000000",
                address="5 River Rd\nParramatta NSW 2150",
            )
        ],
    )


@pytest.fixture
def make_row():
    return report_row
