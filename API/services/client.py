"""
Client service - subscriber registry.

Subscription end dates are derived from the package billing cycle when a
client is created or moved to another package. A client created as
"debted" gets its first invoice in the same transaction.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from loguru import logger
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError
from database.models import (
    Client, Package, Invoice, InvoiceStatus, Payment,
    ServiceStatus, PaymentStatus
)
from schemas.client import ClientCreate, ClientUpdate
from utils.helpers import add_billing_cycle, get_local_today, to_money
from .base import ServiceBase


NULLABLE_FIELDS = {"address", "indebtedness_prefix", "notes"}


def pending_invoices_total(db: Session, client_id: int) -> Decimal:
    total = db.query(func.sum(Invoice.amount)).filter(
        Invoice.client_id == client_id,
        Invoice.status == InvoiceStatus.pending,
    ).scalar()
    return to_money(total)


def compute_due_amount(db: Session, client: Client) -> Decimal:
    """Unpaid pending invoices minus standing credit, never negative."""
    due = pending_invoices_total(db, client.id) - to_money(client.balance_creditor)
    return max(Decimal("0.00"), due)


class ClientService(ServiceBase):
    """Subscriber CRUD and balance queries."""

    def create_client(self, data: ClientCreate) -> Client:
        package = self._get_or_raise(Package, data.package_id, "Package not found")

        start_date = data.start_date or get_local_today()
        end_date = add_billing_cycle(start_date, package.billing_cycle)

        client = Client(
            name=data.name,
            phone=data.phone,
            address=data.address,
            package_id=package.id,
            start_date=start_date,
            subscription_end_date=end_date,
            service_status=data.service_status,
            payment_status=data.payment_status,
            indebtedness_prefix=data.indebtedness_prefix,
            balance_creditor=Decimal(str(data.balance_creditor)),
            notes=data.notes,
        )

        with self.transaction():
            self.db.add(client)
            self.db.flush()  # Get client.id

            if data.payment_status == PaymentStatus.debted:
                self.db.add(Invoice(
                    client_id=client.id,
                    amount=package.monthly_price,
                    details=f"Initial invoice for {package.name}",
                    due_date=end_date,
                    status=InvoiceStatus.pending,
                    is_manual=False,
                ))

        self.db.refresh(client)
        logger.info(
            f"Client created: {client.name} (id={client.id}, "
            f"package={package.name}, ends={end_date})"
        )
        return client

    def list_clients(
        self,
        search: Optional[str] = None,
        service_status: Optional[ServiceStatus] = None,
        payment_status: Optional[PaymentStatus] = None,
        package_id: Optional[int] = None,
    ) -> List[Client]:
        query = self._q(Client)

        if search:
            query = query.filter(or_(
                Client.name.ilike(f"%{search}%"),
                Client.phone.ilike(f"%{search}%"),
            ))

        if service_status:
            query = query.filter(Client.service_status == service_status)

        if payment_status:
            query = query.filter(Client.payment_status == payment_status)

        if package_id:
            query = query.filter(Client.package_id == package_id)

        return query.order_by(Client.id).all()

    def get_client(self, client_id: int) -> Optional[Client]:
        return self._get(Client, client_id)

    def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        """
        Partial update. Moving the client to another package re-validates
        it and recomputes the end date from the (new or existing) start date.
        """
        client = self._get_or_raise(Client, client_id, "Client not found")

        update_data = {
            k: v for k, v in data.model_dump(exclude_unset=True).items()
            if v is not None or k in NULLABLE_FIELDS
        }

        new_package_id = update_data.get('package_id')
        if new_package_id and new_package_id != client.package_id:
            package = self._get_or_raise(Package, new_package_id, "Package not found")
            start_date: date = update_data.get('start_date') or client.start_date
            update_data['subscription_end_date'] = add_billing_cycle(
                start_date, package.billing_cycle
            )

        if 'balance_creditor' in update_data:
            update_data['balance_creditor'] = Decimal(str(update_data['balance_creditor']))

        with self.transaction():
            for key, value in update_data.items():
                setattr(client, key, value)
        self.db.refresh(client)
        return client

    def delete_client(self, client_id: int) -> None:
        """
        Delete a client and its invoices.
        Refused when any payment was ever recorded for the client.
        """
        client = self._get_or_raise(Client, client_id, "Client not found")

        payments_count = self.db.query(func.count(Payment.id)).filter(
            Payment.client_id == client_id
        ).scalar() or 0
        if payments_count > 0:
            raise ConflictError("Cannot delete client with existing payments")

        with self.transaction():
            self._q(Invoice).filter(
                Invoice.client_id == client_id
            ).delete()
            self.db.delete(client)
        logger.info(f"Client deleted: id={client_id}")

    def get_client_due_amount(self, client_id: int) -> Decimal:
        client = self.get_client(client_id)
        if not client:
            raise NotFoundError("Client not found")
        return compute_due_amount(self.db, client)
