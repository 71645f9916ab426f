"""
Client registry router.
Endpoint: /api/v1/clients/...
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, PermissionType, ServiceStatus, PaymentStatus
from core.dependencies import require_section
from schemas.base import DeleteResponse
from schemas.client import (
    ClientCreate, ClientUpdate, ClientResponse,
    ClientListResponse, ClientDueAmountResponse
)
from services.client import ClientService


router = APIRouter()

require_clients = require_section(PermissionType.CLIENTS)


@router.get("", response_model=ClientListResponse)
async def list_clients(
    search: Optional[str] = None,
    service_status: Optional[ServiceStatus] = Query(None, alias="status"),
    payment_status: Optional[PaymentStatus] = None,
    package_id: Optional[int] = None,
    current_user: User = Depends(require_clients),
    db: Session = Depends(get_db)
):
    """List clients; search matches name or phone."""
    clients = ClientService(db).list_clients(
        search=search,
        service_status=service_status,
        payment_status=payment_status,
        package_id=package_id,
    )
    return ClientListResponse(data=clients, total=len(clients))


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    current_user: User = Depends(require_clients),
    db: Session = Depends(get_db)
):
    """
    Create a client. The subscription end date is computed from the
    package billing cycle; a debted client gets an initial invoice.
    """
    return ClientService(db).create_client(data)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    current_user: User = Depends(require_clients),
    db: Session = Depends(get_db)
):
    client = ClientService(db).get_client(client_id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client


@router.get("/{client_id}/due-amount", response_model=ClientDueAmountResponse)
async def get_client_due_amount(
    client_id: int,
    current_user: User = Depends(require_clients),
    db: Session = Depends(get_db)
):
    due = ClientService(db).get_client_due_amount(client_id)
    return ClientDueAmountResponse(client_id=client_id, due_amount=due)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    data: ClientUpdate,
    current_user: User = Depends(require_clients),
    db: Session = Depends(get_db)
):
    return ClientService(db).update_client(client_id, data)


@router.delete("/{client_id}", response_model=DeleteResponse)
async def delete_client(
    client_id: int,
    current_user: User = Depends(require_clients),
    db: Session = Depends(get_db)
):
    """Delete a client and its invoices. 409 if it has payments."""
    ClientService(db).delete_client(client_id)
    return DeleteResponse(message="Client deleted", id=client_id)
