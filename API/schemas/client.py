"""
Client (subscriber) schemas.
"""

from typing import Optional, List
from datetime import date, datetime
from pydantic import BaseModel, Field

from database.models import ServiceStatus, PaymentStatus


class ClientCreate(BaseModel):
    """
    Create a subscriber.
    start_date defaults to today; subscription_end_date is always computed.
    """

    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address: Optional[str] = None
    package_id: int
    start_date: Optional[date] = None
    service_status: ServiceStatus = ServiceStatus.active
    payment_status: PaymentStatus = PaymentStatus.paid
    indebtedness_prefix: Optional[str] = None
    balance_creditor: float = Field(0, ge=0)
    notes: Optional[str] = None


class ClientUpdate(BaseModel):
    """Partial client update."""

    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None
    package_id: Optional[int] = None
    start_date: Optional[date] = None
    service_status: Optional[ServiceStatus] = None
    payment_status: Optional[PaymentStatus] = None
    indebtedness_prefix: Optional[str] = None
    balance_creditor: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class ClientResponse(BaseModel):

    id: int
    name: str
    phone: str
    address: Optional[str] = None
    package_id: int
    start_date: date
    subscription_end_date: date
    service_status: ServiceStatus
    payment_status: PaymentStatus
    indebtedness_prefix: Optional[str] = None
    balance_creditor: float
    notes: Optional[str] = None
    last_push_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ClientListResponse(BaseModel):

    data: List[ClientResponse]
    total: int


class ClientDueAmountResponse(BaseModel):

    client_id: int
    due_amount: float
