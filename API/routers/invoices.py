"""
Invoice router.
Endpoint: /api/v1/invoices/...
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, PermissionType, InvoiceStatus
from core.dependencies import require_section
from schemas.base import DeleteResponse
from schemas.billing import (
    InvoiceCreate, InvoiceStatusUpdate, InvoiceResponse, InvoiceListResponse
)
from services.invoice import InvoiceService


router = APIRouter()

require_invoices = require_section(PermissionType.INVOICES)


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    client_id: Optional[int] = None,
    invoice_status: Optional[InvoiceStatus] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    current_user: User = Depends(require_invoices),
    db: Session = Depends(get_db)
):
    """List invoices, newest first. Date filters apply to the due date."""
    invoices = InvoiceService(db).list_invoices(
        client_id=client_id,
        status=invoice_status,
        date_from=date_from,
        date_to=date_to,
    )
    return InvoiceListResponse(data=invoices, total=len(invoices))


@router.get("/overdue", response_model=InvoiceListResponse)
async def get_overdue_invoices(
    current_user: User = Depends(require_invoices),
    db: Session = Depends(get_db)
):
    """Pending invoices past their due date plus the package grace period."""
    invoices = InvoiceService(db).get_overdue_invoices()
    return InvoiceListResponse(data=invoices, total=len(invoices))


@router.post("/generate-monthly", response_model=InvoiceListResponse)
async def generate_monthly_invoices(
    current_user: User = Depends(require_invoices),
    db: Session = Depends(get_db)
):
    """Bill every active client for the current month. Not idempotent."""
    invoices = InvoiceService(db).generate_monthly_invoices()
    return InvoiceListResponse(data=invoices, total=len(invoices))


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    data: InvoiceCreate,
    current_user: User = Depends(require_invoices),
    db: Session = Depends(get_db)
):
    return InvoiceService(db).create_invoice(data)


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: int,
    current_user: User = Depends(require_invoices),
    db: Session = Depends(get_db)
):
    invoice = InvoiceService(db).get_invoice(invoice_id)
    if not invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found"
        )
    return invoice


@router.patch("/{invoice_id}/status", response_model=InvoiceResponse)
async def update_invoice_status(
    invoice_id: int,
    data: InvoiceStatusUpdate,
    current_user: User = Depends(require_invoices),
    db: Session = Depends(get_db)
):
    return InvoiceService(db).update_invoice_status(invoice_id, data.status)


@router.delete("/{invoice_id}", response_model=DeleteResponse)
async def delete_invoice(
    invoice_id: int,
    current_user: User = Depends(require_invoices),
    db: Session = Depends(get_db)
):
    """Delete an invoice. 409 if payments reference it."""
    InvoiceService(db).delete_invoice(invoice_id)
    return DeleteResponse(message="Invoice deleted", id=invoice_id)
