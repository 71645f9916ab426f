"""
Payment router.
Endpoint: /api/v1/payments/...
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, PermissionType
from core.dependencies import require_section
from schemas.billing import (
    PaymentCreate, PaymentResponse, PaymentListResponse, BatchPaymentResponse
)
from services.payment import PaymentService


router = APIRouter()

require_payments = require_section(PermissionType.PAYMENTS)


@router.get("", response_model=PaymentListResponse)
async def list_payments(
    client_id: Optional[int] = None,
    current_user: User = Depends(require_payments),
    db: Session = Depends(get_db)
):
    payments = PaymentService(db).list_payments(client_id=client_id)
    return PaymentListResponse(data=payments, total=len(payments))


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    data: PaymentCreate,
    current_user: User = Depends(require_payments),
    db: Session = Depends(get_db)
):
    """
    Record a payment. With invoice_id, an amount covering the invoice
    marks it paid.
    """
    return PaymentService(db).create_payment(data)


@router.post("/batch", response_model=BatchPaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_batch_payment(
    data: PaymentCreate,
    current_user: User = Depends(require_payments),
    db: Session = Depends(get_db)
):
    """Pay off pending invoices oldest first, whole invoices only."""
    payment, settled, remaining = PaymentService(db).create_batch_payment(data)
    return BatchPaymentResponse(
        payment=PaymentResponse.model_validate(payment),
        paid_invoice_ids=[invoice.id for invoice in settled],
        unapplied_amount=float(remaining),
    )


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: int,
    current_user: User = Depends(require_payments),
    db: Session = Depends(get_db)
):
    payment = PaymentService(db).get_payment(payment_id)
    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment not found"
        )
    return payment
