"""
Reports router.
Endpoint: /api/v1/reports/...
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, PermissionType
from core.dependencies import require_section
from schemas.report import (
    FinancialReport, DebtorReport, DebtorReportItem,
    MonthlyRevenueReport, MonthlyRevenue,
    PackageRevenueReport, PackageRevenue
)
from services.report import ReportService
from utils.helpers import get_local_today, month_bounds


router = APIRouter()

require_reports = require_section(PermissionType.REPORTS)


def _resolve_period(date_from: Optional[date], date_to: Optional[date]):
    """Default to the current month; reject inverted windows."""
    if date_from is None or date_to is None:
        month_start, month_end = month_bounds(get_local_today())
        date_from = date_from or month_start
        date_to = date_to or month_end
    if date_from > date_to:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="date_from must not be after date_to"
        )
    return date_from, date_to


@router.get("/financial", response_model=FinancialReport)
async def get_financial_report(
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    current_user: User = Depends(require_reports),
    db: Session = Depends(get_db)
):
    """
    Revenue and expense summary for a period.

    Subscription revenue counts paid invoices by due date; other income
    and expenses count by their own dates. Defaults to the current month.
    """
    date_from, date_to = _resolve_period(date_from, date_to)
    return FinancialReport(
        **ReportService(db).generate_financial_report(date_from, date_to)
    )


@router.get("/debtors", response_model=DebtorReport)
async def get_debtor_report(
    current_user: User = Depends(require_reports),
    db: Session = Depends(get_db)
):
    """Debted clients, longest delay first."""
    rows = ReportService(db).generate_debtor_report()
    return DebtorReport(
        data=[DebtorReportItem(**row) for row in rows],
        total=len(rows)
    )


@router.get("/monthly-revenues", response_model=MonthlyRevenueReport)
async def get_monthly_revenues(
    year: Optional[int] = Query(None, ge=2000, le=2100),
    current_user: User = Depends(require_reports),
    db: Session = Depends(get_db)
):
    year = year or get_local_today().year
    months = ReportService(db).get_monthly_revenues(year)
    return MonthlyRevenueReport(
        year=year,
        months=[MonthlyRevenue(**m) for m in months]
    )


@router.get("/revenue-by-package", response_model=PackageRevenueReport)
async def get_revenue_by_package(
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    current_user: User = Depends(require_reports),
    db: Session = Depends(get_db)
):
    date_from, date_to = _resolve_period(date_from, date_to)
    rows = ReportService(db).get_revenue_by_package(date_from, date_to)
    return PackageRevenueReport(
        data=[PackageRevenue(**row) for row in rows],
        date_from=date_from,
        date_to=date_to
    )
