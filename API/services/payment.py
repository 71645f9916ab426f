"""
Payment service - recording payments and reconciling invoices.

Payments are immutable. A payment tied to one invoice settles it when it
covers the full amount; a batch payment is spread over the client's
pending invoices, oldest due date first, settling whole invoices only.
"""

from decimal import Decimal
from typing import List, Optional, Tuple

from loguru import logger

from core.exceptions import ConflictError, NotFoundError
from database.models import Client, Invoice, InvoiceStatus, Payment
from schemas.billing import PaymentCreate
from utils.helpers import to_money
from .base import ServiceBase
from .invoice import refresh_client_payment_status


BATCH_PAYMENT_NOTE = "Batch payment - distributed across multiple invoices"


class PaymentService(ServiceBase):
    """Payment reconciler."""

    def create_payment(self, data: PaymentCreate) -> Payment:
        client = self._get_or_raise(Client, data.client_id, "Client not found")

        invoice = None
        if data.invoice_id:
            invoice = self._q(Invoice).filter(
                Invoice.id == data.invoice_id,
                Invoice.client_id == client.id,
            ).first()
            if not invoice:
                raise NotFoundError("Invoice not found or does not belong to the client")

        payment = Payment(
            client_id=client.id,
            invoice_id=invoice.id if invoice else None,
            amount=to_money(data.amount),
            method=data.method,
            notes=data.notes,
        )

        with self.transaction():
            self.db.add(payment)

            if invoice and payment.amount >= to_money(invoice.amount):
                invoice.status = InvoiceStatus.paid

            refresh_client_payment_status(self.db, client)

        self.db.refresh(payment)
        logger.info(
            f"Payment recorded: id={payment.id} client={client.id} "
            f"invoice={payment.invoice_id} amount={payment.amount} "
            f"-> client {client.payment_status.value}"
        )
        return payment

    def create_batch_payment(
        self, data: PaymentCreate
    ) -> Tuple[Payment, List[Invoice], Decimal]:
        """
        Record one unallocated payment and settle pending invoices in due
        date order while the remaining funds cover each one in full.

        Stops at the first invoice that cannot be fully covered; that
        invoice and the leftover funds are left as they are (no partial
        invoice payments).

        Returns (payment, settled invoices, unapplied amount).
        """
        client = self._get_or_raise(Client, data.client_id, "Client not found")

        pending = self._q(Invoice).filter(
            Invoice.client_id == client.id,
            Invoice.status == InvoiceStatus.pending,
        ).order_by(Invoice.due_date.asc(), Invoice.id.asc()).all()

        if not pending:
            raise ConflictError("No unpaid invoices found for this client")

        payment = Payment(
            client_id=client.id,
            invoice_id=None,
            amount=to_money(data.amount),
            method=data.method,
            notes=data.notes or BATCH_PAYMENT_NOTE,
        )

        settled: List[Invoice] = []
        remaining = payment.amount

        with self.transaction():
            self.db.add(payment)

            for invoice in pending:
                invoice_amount = to_money(invoice.amount)
                if remaining < invoice_amount:
                    break
                invoice.status = InvoiceStatus.paid
                remaining -= invoice_amount
                settled.append(invoice)

            refresh_client_payment_status(self.db, client)

        self.db.refresh(payment)
        logger.info(
            f"Batch payment recorded: id={payment.id} client={client.id} "
            f"amount={payment.amount} settled={len(settled)} invoice(s), "
            f"unapplied={remaining}"
        )
        return payment, settled, remaining

    def list_payments(self, client_id: Optional[int] = None) -> List[Payment]:
        query = self._q(Payment)
        if client_id is not None:
            query = query.filter(Payment.client_id == client_id)
        return query.order_by(Payment.created_at.desc(), Payment.id.desc()).all()

    def get_payment(self, payment_id: int) -> Optional[Payment]:
        return self._get(Payment, payment_id)
