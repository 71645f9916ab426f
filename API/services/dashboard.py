"""
Dashboard service - one aggregate snapshot, computed on every call.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy import func

from database.models import (
    Client, Payment, Income, ServiceStatus, PaymentStatus
)
from utils.helpers import get_local_today, month_bounds, to_money
from .base import ServiceBase
from .client import compute_due_amount


class DashboardService(ServiceBase):

    def get_stats(self, today: Optional[date] = None) -> dict:
        """
        total_debts sums each debted client's due amount (pending invoices
        minus standing credit, floored at zero), the same figure the client
        due-amount query and the debtor report return, rather than the raw
        balance_creditor column.
        """
        today = today or get_local_today()
        month_start, month_end = month_bounds(today)

        total_clients = self.db.query(func.count(Client.id)).scalar() or 0

        total_active_clients = self.db.query(func.count(Client.id)).filter(
            Client.service_status == ServiceStatus.active
        ).scalar() or 0

        debtors = self._q(Client).filter(
            Client.payment_status == PaymentStatus.debted
        ).all()
        total_debts = sum(
            (compute_due_amount(self.db, c) for c in debtors), Decimal("0.00")
        )

        # Payments are timestamped, incomes are dated
        payments_revenue = self.db.query(func.sum(Payment.amount)).filter(
            Payment.created_at >= datetime.combine(month_start, time.min),
            Payment.created_at < datetime.combine(month_end + timedelta(days=1), time.min),
        ).scalar()

        incomes_revenue = self.db.query(func.sum(Income.amount)).filter(
            Income.date >= month_start,
            Income.date <= month_end,
        ).scalar()

        return {
            "total_clients": total_clients,
            "total_active_clients": total_active_clients,
            "number_of_debtors": len(debtors),
            "total_debts": total_debts,
            "current_month_revenues": to_money(payments_revenue) + to_money(incomes_revenue),
        }
