"""
Invoice and payment schemas.
"""

from typing import Optional, List
from datetime import date, datetime
from pydantic import BaseModel, Field

from database.models import InvoiceStatus, PaymentMethod


# ==================== INVOICES ====================

class InvoiceCreate(BaseModel):
    """Issue an invoice to a client. New invoices are always pending."""

    client_id: int
    amount: float = Field(..., gt=0)
    details: Optional[str] = None
    due_date: date
    is_manual: bool = False


class InvoiceStatusUpdate(BaseModel):

    status: InvoiceStatus


class InvoiceResponse(BaseModel):

    id: int
    client_id: int
    amount: float
    details: Optional[str] = None
    due_date: date
    status: InvoiceStatus
    is_manual: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class InvoiceListResponse(BaseModel):

    data: List[InvoiceResponse]
    total: int


# ==================== PAYMENTS ====================

class PaymentCreate(BaseModel):
    """
    Record a payment. invoice_id is optional; the batch endpoint
    ignores it and spreads the amount over pending invoices.
    """

    client_id: int
    invoice_id: Optional[int] = None
    amount: float = Field(..., gt=0)
    method: PaymentMethod
    notes: Optional[str] = None


class PaymentResponse(BaseModel):

    id: int
    client_id: int
    invoice_id: Optional[int] = None
    amount: float
    method: PaymentMethod
    notes: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class PaymentListResponse(BaseModel):

    data: List[PaymentResponse]
    total: int


class BatchPaymentResponse(BaseModel):
    """Batch payment plus how it was distributed."""

    payment: PaymentResponse
    paid_invoice_ids: List[int]
    unapplied_amount: float
