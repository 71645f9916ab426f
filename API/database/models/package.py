"""
Package model - internet service tiers offered to subscribers.
"""

from enum import Enum as PyEnum
from sqlalchemy import Column, String, Integer, Text, Numeric, Enum
from sqlalchemy.orm import relationship

from ..base import BaseModel, TimestampMixin


class BillingCycle(str, PyEnum):
    """Subscription period length."""
    monthly = "monthly"
    quarterly = "quarterly"
    semi_annual = "semi_annual"
    annual = "annual"


# Months added to a start date for one billing cycle
BILLING_CYCLE_MONTHS = {
    BillingCycle.monthly: 1,
    BillingCycle.quarterly: 3,
    BillingCycle.semi_annual: 6,
    BillingCycle.annual: 12,
}


class PackageStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"


class Package(BaseModel, TimestampMixin):
    """Named service tier: speed, price, billing cycle and grace period."""

    __tablename__ = 'packages'

    name = Column(String(200), nullable=False)
    speed = Column(String(100), nullable=False)
    monthly_price = Column(Numeric(10, 2), nullable=False)
    billing_cycle = Column(Enum(BillingCycle), nullable=False)
    status = Column(Enum(PackageStatus), default=PackageStatus.active, nullable=False)
    days_allowed = Column(Integer, nullable=False)  # grace period after due date
    description = Column(Text, nullable=True)

    # Relationships
    clients = relationship("Client", back_populates="package", lazy="dynamic")
