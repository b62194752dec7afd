from __future__ import annotations

import logging
from datetime import date, datetime

import pytest

from care_billing.core.exceptions import InvalidInput, ValidationError
from care_billing.shifts.service import ShiftService


def test_quote_uses_rate_card_for_category(line_items_repo, shifts_repo):
    svc = ShiftService(shifts_repo, line_items_repo)

    allocation = svc.quote(shift_date="2025-01-08", start_time="09:00", end_time="17:00", category="Personal Care")

    assert [line.code for line in allocation.breakdown] == ["PC-DAY"]
    assert allocation.total == pytest.approx(684.0)
    assert shifts_repo.records == {}


def test_quote_logs_uncovered_minutes(line_items_repo, shifts_repo, caplog):
    svc = ShiftService(shifts_repo, line_items_repo)

    with caplog.at_level(logging.WARNING, logger="care_billing.shifts.service"):
        allocation = svc.quote(shift_date="2025-01-12", start_time="09:00", end_time="11:00", category="Personal Care")

    assert allocation.breakdown == ()
    assert allocation.uncovered_minutes == 120
    assert "not covered by any line item" in caplog.text


def test_create_overnight_shift_ends_next_day(line_items_repo, shifts_repo):
    svc = ShiftService(shifts_repo, line_items_repo)

    saved = svc.create(
        shift_date="2025-01-08",
        start_time="22:00",
        end_time="06:00",
        carer_id=7,
        client_id=10,
        category="Personal Care",
    )

    rec = shifts_repo.get_by_id(saved.shift_id)
    assert rec.time_from == datetime(2025, 1, 8, 22, 0)
    assert rec.time_to == datetime(2025, 1, 9, 6, 0)
    assert rec.cost == pytest.approx(8 * 95.0)
    assert rec.carer_id == 7
    assert rec.client_id == 10
    # First line item of the category, by code.
    assert rec.line_item_id == 1


def test_create_manual_entry_shift_has_no_line_item(line_items_repo, shifts_repo):
    svc = ShiftService(shifts_repo, line_items_repo)

    saved = svc.create(
        shift_date=date(2025, 1, 8),
        start_time="09:00",
        end_time="12:00",
        carer_id=3,
        category="HIREUP",
        manual_cost=150.0,
    )

    rec = shifts_repo.get_by_id(saved.shift_id)
    assert rec.category == "HIREUP"
    assert rec.line_item_id is None
    assert rec.cost == 150.0


def test_create_manual_entry_with_bad_cost_persists_nothing(line_items_repo, shifts_repo):
    svc = ShiftService(shifts_repo, line_items_repo)

    with pytest.raises(InvalidInput):
        svc.create(
            shift_date="2025-01-08",
            start_time="09:00",
            end_time="12:00",
            carer_id=3,
            category="HIREUP",
            manual_cost=-5,
        )

    assert shifts_repo.records == {}


def test_create_rejects_category_without_rate_card(line_items_repo, shifts_repo):
    svc = ShiftService(shifts_repo, line_items_repo)

    with pytest.raises(ValidationError, match="Selected category not found"):
        svc.create(shift_date="2025-01-08", start_time="09:00", end_time="12:00", carer_id=3, category="Transport")


@pytest.mark.parametrize(
    "overrides",
    [
        {"carer_id": 0},
        {"carer_id": "abc"},
        {"end_time": ""},
        {"category": ""},
        {"shift_date": "08/01/2025"},
    ],
)
def test_create_rejects_invalid_input(line_items_repo, shifts_repo, overrides):
    svc = ShiftService(shifts_repo, line_items_repo)
    fields = {
        "shift_date": "2025-01-08",
        "start_time": "09:00",
        "end_time": "12:00",
        "carer_id": 3,
        "category": "Personal Care",
    }
    fields.update(overrides)

    with pytest.raises(ValidationError):
        svc.create(**fields)

    assert shifts_repo.records == {}


def test_update_recomputes_cost(line_items_repo, shifts_repo):
    svc = ShiftService(shifts_repo, line_items_repo)
    saved = svc.create(shift_date="2025-01-08", start_time="09:00", end_time="10:00", carer_id=3, category="Personal Care")

    updated = svc.update(
        shift_id=saved.shift_id,
        shift_date="2025-01-11",
        start_time="09:00",
        end_time="11:00",
        carer_id=4,
        category="Personal Care",
    )

    rec = shifts_repo.get_by_id(saved.shift_id)
    assert updated.cost == pytest.approx(240.0)
    assert rec.cost == pytest.approx(240.0)
    assert rec.shift_date == date(2025, 1, 11)
    assert rec.carer_id == 4


def test_update_unknown_shift_fails(line_items_repo, shifts_repo):
    svc = ShiftService(shifts_repo, line_items_repo)

    with pytest.raises(ValidationError, match="Shift not found"):
        svc.update(
            shift_id=99,
            shift_date="2025-01-08",
            start_time="09:00",
            end_time="10:00",
            carer_id=3,
            category="Personal Care",
        )


def test_delete(line_items_repo, shifts_repo):
    svc = ShiftService(shifts_repo, line_items_repo)
    saved = svc.create(shift_date="2025-01-08", start_time="09:00", end_time="10:00", carer_id=3, category="Personal Care")

    svc.delete(shift_id=saved.shift_id)

    assert shifts_repo.get_by_id(saved.shift_id) is None
    with pytest.raises(ValidationError):
        svc.delete(shift_id=saved.shift_id)
