"""
Invoice service - issuing invoices, status changes, monthly batch
generation and the overdue view.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional

from loguru import logger
from sqlalchemy import func
from sqlalchemy.orm import Session

from core.exceptions import ConflictError
from database.models import (
    Client, Package, Invoice, InvoiceStatus, Payment,
    ServiceStatus, PaymentStatus
)
from schemas.billing import InvoiceCreate
from utils.helpers import get_local_today, month_bounds, to_money
from .base import ServiceBase


def has_pending_invoices(db: Session, client_id: int) -> bool:
    return db.query(Invoice.id).filter(
        Invoice.client_id == client_id,
        Invoice.status == InvoiceStatus.pending,
    ).first() is not None


def refresh_client_payment_status(db: Session, client: Client) -> PaymentStatus:
    """Client is debted while any pending invoice remains, paid otherwise."""
    db.flush()
    client.payment_status = (
        PaymentStatus.debted if has_pending_invoices(db, client.id) else PaymentStatus.paid
    )
    return client.payment_status


def is_overdue(invoice: Invoice, days_allowed: int, today: date) -> bool:
    """
    Pending and past its due date plus the package grace period. The last
    grace day still counts as on time; the invoice is overdue from the next day.
    """
    if invoice.status == InvoiceStatus.overdue:
        return True
    if invoice.status != InvoiceStatus.pending:
        return False
    return today > invoice.due_date + timedelta(days=days_allowed)


class InvoiceService(ServiceBase):
    """Invoice ledger."""

    def create_invoice(self, data: InvoiceCreate) -> Invoice:
        client = self._get_or_raise(Client, data.client_id, "Client not found")

        invoice = Invoice(
            client_id=client.id,
            amount=Decimal(str(data.amount)),
            details=data.details,
            due_date=data.due_date,
            is_manual=data.is_manual,
            status=InvoiceStatus.pending,
        )

        with self.transaction():
            self.db.add(invoice)
            client.payment_status = PaymentStatus.debted

        self.db.refresh(invoice)
        logger.info(f"Invoice created: id={invoice.id} client={client.id} amount={invoice.amount}")
        return invoice

    def list_invoices(
        self,
        client_id: Optional[int] = None,
        status: Optional[InvoiceStatus] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[Invoice]:
        query = self._q(Invoice)

        if client_id is not None:
            query = query.filter(Invoice.client_id == client_id)
        if status:
            query = query.filter(Invoice.status == status)
        if date_from:
            query = query.filter(Invoice.due_date >= date_from)
        if date_to:
            query = query.filter(Invoice.due_date <= date_to)

        return query.order_by(Invoice.created_at.desc(), Invoice.id.desc()).all()

    def get_invoice(self, invoice_id: int) -> Optional[Invoice]:
        return self._get(Invoice, invoice_id)

    def update_invoice_status(self, invoice_id: int, status: InvoiceStatus) -> Invoice:
        """
        Set the status. Marking an invoice paid settles the client when it
        was their last pending invoice; other transitions leave the client
        untouched.
        """
        invoice = self._get_or_raise(Invoice, invoice_id, "Invoice not found")

        with self.transaction():
            invoice.status = status
            if status == InvoiceStatus.paid:
                self.db.flush()
                if not has_pending_invoices(self.db, invoice.client_id):
                    invoice.client.payment_status = PaymentStatus.paid

        self.db.refresh(invoice)
        return invoice

    def delete_invoice(self, invoice_id: int) -> None:
        invoice = self._get_or_raise(Invoice, invoice_id, "Invoice not found")

        payments_count = self.db.query(func.count(Payment.id)).filter(
            Payment.invoice_id == invoice_id
        ).scalar() or 0
        if payments_count > 0:
            raise ConflictError("Cannot delete invoice with associated payments")

        with self.transaction():
            self.db.delete(invoice)
        logger.info(f"Invoice deleted: id={invoice_id}")

    # ==================== MONTHLY GENERATION ====================

    def generate_monthly_invoices(self, today: Optional[date] = None) -> List[Invoice]:
        """
        Bill every active client for one month, net of standing credit.

        Credit smaller than the price is consumed and the rest is invoiced,
        due on the last day of the current month. Credit that covers the
        price is reduced by the price and no invoice is issued.
        Not idempotent: running it twice bills twice.
        """
        today = today or get_local_today()
        _, due_date = month_bounds(today)

        rows = self.db.query(Client, Package).join(
            Package, Client.package_id == Package.id
        ).filter(
            Client.service_status == ServiceStatus.active
        ).order_by(Client.id).all()

        created: List[Invoice] = []
        skipped = 0

        with self.transaction():
            for client, package in rows:
                price = to_money(package.monthly_price)
                credit = to_money(client.balance_creditor)
                amount = price - credit

                if amount > 0:
                    invoice = Invoice(
                        client_id=client.id,
                        amount=amount,
                        details=f"Monthly subscription fee for {client.name}",
                        due_date=due_date,
                        is_manual=False,
                        status=InvoiceStatus.pending,
                    )
                    self.db.add(invoice)
                    created.append(invoice)
                    client.balance_creditor = max(Decimal("0.00"), credit - price)
                    client.payment_status = PaymentStatus.debted
                else:
                    client.balance_creditor = credit - price
                    skipped += 1

        for invoice in created:
            self.db.refresh(invoice)

        logger.info(
            f"Monthly invoices generated: {len(created)} created, "
            f"{skipped} covered by credit (due {due_date})"
        )
        return created

    # ==================== OVERDUE ====================

    def get_overdue_invoices(self, today: Optional[date] = None) -> List[Invoice]:
        """
        Pending invoices past due date plus the client's package grace
        period. Read-only: statuses are not rewritten.
        """
        today = today or get_local_today()

        rows = self.db.query(Invoice, Package.days_allowed).join(
            Client, Invoice.client_id == Client.id
        ).join(
            Package, Client.package_id == Package.id
        ).filter(
            Invoice.status == InvoiceStatus.pending
        ).order_by(Invoice.due_date).all()

        return [
            invoice for invoice, days_allowed in rows
            if is_overdue(invoice, days_allowed, today)
        ]
