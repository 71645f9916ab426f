"""
Small date and money helpers shared by the services.
"""

import calendar
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple, Union

from database.base import get_local_now, get_local_today
from database.models import BillingCycle, BILLING_CYCLE_MONTHS

__all__ = [
    "get_local_now",
    "get_local_today",
    "add_months",
    "add_billing_cycle",
    "month_bounds",
    "to_money",
]

CENT = Decimal("0.01")


def add_months(start: date, months: int) -> date:
    """
    Calendar-month arithmetic. The day is clamped to the last day of the
    target month, so Jan 31 + 1 month is Feb 28 (or 29).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def add_billing_cycle(start: date, cycle: Union[BillingCycle, str]) -> date:
    """End of one subscription period starting at `start`."""
    return add_months(start, BILLING_CYCLE_MONTHS[BillingCycle(cycle)])


def month_bounds(day: date) -> Tuple[date, date]:
    """First and last calendar day of the month containing `day`."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def to_money(value: Optional[Union[Decimal, float, int, str]]) -> Decimal:
    """Convert a number (or NULL aggregate) to a 2-place Decimal."""
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
