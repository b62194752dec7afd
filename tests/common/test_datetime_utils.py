from datetime import date, datetime, time, timedelta

import pytest

from care_billing.common.datetime_utils import (
    day_type_for,
    hours_between,
    parse_hhmm,
    parse_iso_date,
    shift_duration_minutes,
)
from care_billing.core.enums import DayType
from care_billing.core.exceptions import InvalidInput
from care_billing.database.mysql_base import normalize_mysql_time


def test_day_type_for_week():
    assert day_type_for(date(2025, 1, 6)) == DayType.WEEKDAY
    assert day_type_for(date(2025, 1, 10)) == DayType.WEEKDAY
    assert day_type_for(date(2025, 1, 11)) == DayType.SATURDAY
    assert day_type_for(date(2025, 1, 12)) == DayType.SUNDAY


def test_shift_duration_rolls_over_midnight():
    assert shift_duration_minutes(time(9, 0), time(17, 0)) == 480
    assert shift_duration_minutes(time(22, 0), time(6, 0)) == 480


def test_parse_hhmm_blank_is_none():
    assert parse_hhmm("  ") is None
    assert parse_hhmm("07:45") == time(7, 45)


def test_hours_between_never_negative():
    start = datetime(2025, 1, 8, 10, 0)
    assert hours_between(start, start + timedelta(minutes=90)) == 1.5
    assert hours_between(start, start - timedelta(hours=1)) == 0.0


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(hours=8, minutes=30), time(8, 30)),
        ("22:00:00", time(22, 0)),
        ("24:00:00", None),
        (timedelta(hours=24), None),
        (None, None),
    ],
)
def test_normalize_mysql_time(value, expected):
    assert normalize_mysql_time(value) == expected


@pytest.mark.parametrize("value", [900, 9.5, ["09:00"]])
def test_parse_hhmm_rejects_non_text(value):
    with pytest.raises(InvalidInput):
        parse_hhmm(value)


@pytest.mark.parametrize("value", [20250108, None, ""])
def test_parse_iso_date_rejects_non_dates(value):
    with pytest.raises(InvalidInput):
        parse_iso_date(value)
