"""
Client model - ISP subscribers.
"""

from enum import Enum as PyEnum
from sqlalchemy import (
    Column, String, Integer, Text, Numeric,
    Date, DateTime, Enum, ForeignKey, Index
)
from sqlalchemy.orm import relationship

from ..base import BaseModel, TimestampMixin


class ServiceStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"


class PaymentStatus(str, PyEnum):
    paid = "paid"
    debted = "debted"


class Client(BaseModel, TimestampMixin):
    """Subscriber record tied to one package."""

    __tablename__ = 'clients'

    name = Column(String(200), nullable=False)
    phone = Column(String(50), nullable=False, index=True)
    address = Column(Text, nullable=True)

    package_id = Column(Integer, ForeignKey('packages.id'), nullable=False)

    # Subscription period
    start_date = Column(Date, nullable=False)
    subscription_end_date = Column(Date, nullable=False)

    # Status
    service_status = Column(Enum(ServiceStatus), nullable=False)
    payment_status = Column(Enum(PaymentStatus), nullable=False)
    indebtedness_prefix = Column(String(50), nullable=True)

    # Standing credit, consumed first by future invoices
    balance_creditor = Column(Numeric(10, 2), default=0, nullable=False)

    notes = Column(Text, nullable=True)
    last_push_date = Column(DateTime, nullable=True)

    # Relationships
    package = relationship("Package", back_populates="clients")
    invoices = relationship("Invoice", back_populates="client", lazy="dynamic")
    payments = relationship("Payment", back_populates="client", lazy="dynamic")

    __table_args__ = (
        Index('ix_clients_package_id', 'package_id'),
        Index('ix_clients_payment_status', 'payment_status'),
        Index('ix_clients_service_status', 'service_status'),
    )
