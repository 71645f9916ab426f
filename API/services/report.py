"""
Report service - financial summary, debtors, monthly and per-package
revenue. Read-only aggregations.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func

from database.models import (
    Client, Package, Invoice, InvoiceStatus, Payment,
    PaymentStatus, Expense, Income
)
from utils.helpers import get_local_today, to_money
from .base import ServiceBase
from .client import compute_due_amount
from .invoice import is_overdue


class ReportService(ServiceBase):

    # ==================== FINANCIAL ====================

    def generate_financial_report(self, date_from: date, date_to: date) -> dict:
        """
        Subscription revenue is the sum of paid invoices due in the window;
        other income and expenses are summed by their own dates.
        """
        subscription_revenues = to_money(self.db.query(func.sum(Invoice.amount)).filter(
            Invoice.status == InvoiceStatus.paid,
            Invoice.due_date >= date_from,
            Invoice.due_date <= date_to,
        ).scalar())

        other_income = to_money(self.db.query(func.sum(Income.amount)).filter(
            Income.date >= date_from,
            Income.date <= date_to,
        ).scalar())

        total_expenses = to_money(self.db.query(func.sum(Expense.amount)).filter(
            Expense.date >= date_from,
            Expense.date <= date_to,
        ).scalar())

        total_revenues = subscription_revenues + other_income

        return {
            "subscription_revenues": subscription_revenues,
            "other_income": other_income,
            "total_revenues": total_revenues,
            "total_expenses": total_expenses,
            "net_profit": total_revenues - total_expenses,
            "period_start": date_from,
            "period_end": date_to,
        }

    # ==================== DEBTORS ====================

    def generate_debtor_report(self, today: Optional[date] = None) -> List[dict]:
        """
        One row per debted client, longest delay first.

        days_delay counts whole days since the due date of the client's
        oldest overdue invoice (0 when nothing is overdue). due_amount uses
        the same formula as the client due-amount query.
        """
        today = today or get_local_today()

        debtors = self._q(Client).filter(
            Client.payment_status == PaymentStatus.debted
        ).order_by(Client.id).all()

        result = []
        for client in debtors:
            days_allowed = client.package.days_allowed if client.package else 0

            open_invoices = self._q(Invoice).filter(
                Invoice.client_id == client.id,
                Invoice.status.in_([InvoiceStatus.pending, InvoiceStatus.overdue]),
            ).order_by(Invoice.due_date.asc()).all()
            oldest_overdue = next(
                (inv for inv in open_invoices if is_overdue(inv, days_allowed, today)),
                None,
            )
            days_delay = max(0, (today - oldest_overdue.due_date).days) if oldest_overdue else 0

            last_payment_date = self.db.query(func.max(Payment.created_at)).filter(
                Payment.client_id == client.id
            ).scalar()

            result.append({
                "client_id": client.id,
                "client_name": client.name,
                "phone": client.phone,
                "due_amount": compute_due_amount(self.db, client),
                "days_delay": days_delay,
                "last_payment_date": last_payment_date,
            })

        return sorted(result, key=lambda x: x["days_delay"], reverse=True)

    # ==================== REVENUE ====================

    def get_monthly_revenues(self, year: int) -> List[dict]:
        """Paid invoice amounts bucketed by due-date month, all 12 months."""
        invoices = self.db.query(Invoice.due_date, Invoice.amount).filter(
            Invoice.status == InvoiceStatus.paid,
            Invoice.due_date >= date(year, 1, 1),
            Invoice.due_date <= date(year, 12, 31),
        ).all()

        buckets = {month: Decimal("0.00") for month in range(1, 13)}
        for due_date, amount in invoices:
            buckets[due_date.month] += to_money(amount)

        return [{"month": m, "revenue": buckets[m]} for m in range(1, 13)]

    def get_revenue_by_package(self, date_from: date, date_to: date) -> List[dict]:
        """Paid invoice amounts in the window grouped by the client's package."""
        revenue = func.sum(Invoice.amount).label("revenue")

        rows = self.db.query(
            Package.id, Package.name, revenue
        ).join(
            Client, Client.package_id == Package.id
        ).join(
            Invoice, Invoice.client_id == Client.id
        ).filter(
            Invoice.status == InvoiceStatus.paid,
            Invoice.due_date >= date_from,
            Invoice.due_date <= date_to,
        ).group_by(Package.id, Package.name).all()

        result = [
            {"package_id": pid, "package_name": name, "revenue": to_money(total)}
            for pid, name, total in rows
        ]
        return sorted(result, key=lambda x: x["revenue"], reverse=True)
