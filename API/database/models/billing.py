"""
Billing models - invoices issued to clients and the payments received.
"""

from enum import Enum as PyEnum
from sqlalchemy import (
    Column, Integer, Text, Numeric,
    Date, Boolean, Enum, ForeignKey, Index
)
from sqlalchemy.orm import relationship

from ..base import BaseModel, TimestampMixin, CreatedAtMixin


class InvoiceStatus(str, PyEnum):
    pending = "pending"
    paid = "paid"
    overdue = "overdue"
    cancelled = "cancelled"


class PaymentMethod(str, PyEnum):
    cash = "cash"
    bank_transfer = "bank_transfer"
    credit_card = "credit_card"
    other = "other"


class Invoice(BaseModel, TimestampMixin):
    """Amount owed by a client, due on a calendar date."""

    __tablename__ = 'invoices'

    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False)

    amount = Column(Numeric(10, 2), nullable=False)
    details = Column(Text, nullable=True)
    due_date = Column(Date, nullable=False)

    status = Column(Enum(InvoiceStatus), default=InvoiceStatus.pending, nullable=False)
    is_manual = Column(Boolean, default=False, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="invoices")
    payments = relationship("Payment", back_populates="invoice", lazy="dynamic")

    __table_args__ = (
        Index('ix_invoices_client_status', 'client_id', 'status'),
        Index('ix_invoices_due_date', 'due_date'),
    )


class Payment(BaseModel, CreatedAtMixin):
    """
    Money received from a client. Immutable once recorded.
    invoice_id is NULL for batch payments spread over several invoices.
    """

    __tablename__ = 'payments'

    client_id = Column(Integer, ForeignKey('clients.id'), nullable=False, index=True)
    invoice_id = Column(Integer, ForeignKey('invoices.id'), nullable=True, index=True)

    amount = Column(Numeric(10, 2), nullable=False)
    method = Column(Enum(PaymentMethod), nullable=False)
    notes = Column(Text, nullable=True)

    # Relationships
    client = relationship("Client", back_populates="payments")
    invoice = relationship("Invoice", back_populates="payments")
