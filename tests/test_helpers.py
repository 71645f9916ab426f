from datetime import date
from decimal import Decimal

import pytest

from database.models import BillingCycle
from utils.helpers import add_billing_cycle, add_months, month_bounds, to_money


@pytest.mark.parametrize("cycle,expected", [
    (BillingCycle.monthly, date(2024, 2, 15)),
    (BillingCycle.quarterly, date(2024, 4, 15)),
    (BillingCycle.semi_annual, date(2024, 7, 15)),
    (BillingCycle.annual, date(2025, 1, 15)),
])
def test_billing_cycle_adds_calendar_months(cycle, expected):
    assert add_billing_cycle(date(2024, 1, 15), cycle) == expected


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 8, 31), 6) == date(2025, 2, 28)


def test_add_months_crosses_year():
    assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)


def test_month_bounds():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(date(2024, 12, 31)) == (date(2024, 12, 1), date(2024, 12, 31))


def test_to_money():
    assert to_money(None) == Decimal("0.00")
    assert to_money(10) == Decimal("10.00")
    assert to_money(0.1 + 0.2) == Decimal("0.30")
    assert to_money("12.345") == Decimal("12.35")
