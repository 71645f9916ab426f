"""
Report and dashboard schemas.
"""

from typing import Optional, List
from datetime import date, datetime
from pydantic import BaseModel


class FinancialReport(BaseModel):
    """Revenue, expenses and profit for a date window."""

    subscription_revenues: float
    other_income: float
    total_revenues: float
    total_expenses: float
    net_profit: float
    period_start: date
    period_end: date


class DebtorReportItem(BaseModel):

    client_id: int
    client_name: str
    phone: str
    due_amount: float
    days_delay: int
    last_payment_date: Optional[datetime] = None


class DebtorReport(BaseModel):

    data: List[DebtorReportItem]
    total: int


class MonthlyRevenue(BaseModel):

    month: int
    revenue: float


class MonthlyRevenueReport(BaseModel):

    year: int
    months: List[MonthlyRevenue]


class PackageRevenue(BaseModel):

    package_id: int
    package_name: str
    revenue: float


class PackageRevenueReport(BaseModel):

    data: List[PackageRevenue]
    date_from: date
    date_to: date


class DashboardStats(BaseModel):
    """Dashboard snapshot, computed on every request."""

    total_clients: int
    total_active_clients: int
    number_of_debtors: int
    total_debts: float
    current_month_revenues: float
