"""
Expense ledger router.
Endpoint: /api/v1/expenses/...
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, PermissionType
from core.dependencies import require_section
from schemas.base import DeleteResponse
from schemas.finance import (
    ExpenseCreate, ExpenseUpdate, ExpenseResponse, ExpenseListResponse, LedgerTotalResponse
)
from services.finance import ExpenseService


router = APIRouter()

require_expenses = require_section(PermissionType.EXPENSES)


@router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    current_user: User = Depends(require_expenses),
    db: Session = Depends(get_db)
):
    """List expenses, latest date first. Bounds are inclusive."""
    entries = ExpenseService(db).list(date_from, date_to)
    return ExpenseListResponse(data=entries, total=len(entries))


@router.get("/total", response_model=LedgerTotalResponse)
async def get_expense_total(
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    current_user: User = Depends(require_expenses),
    db: Session = Depends(get_db)
):
    total = ExpenseService(db).get_total(date_from, date_to)
    return LedgerTotalResponse(total=float(total), date_from=date_from, date_to=date_to)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    data: ExpenseCreate,
    current_user: User = Depends(require_expenses),
    db: Session = Depends(get_db)
):
    return ExpenseService(db).create(data)


@router.get("/{entry_id}", response_model=ExpenseResponse)
async def get_expense(
    entry_id: int,
    current_user: User = Depends(require_expenses),
    db: Session = Depends(get_db)
):
    entry = ExpenseService(db).get(entry_id)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )
    return entry


@router.put("/{entry_id}", response_model=ExpenseResponse)
async def update_expense(
    entry_id: int,
    data: ExpenseUpdate,
    current_user: User = Depends(require_expenses),
    db: Session = Depends(get_db)
):
    return ExpenseService(db).update(entry_id, data)


@router.delete("/{entry_id}", response_model=DeleteResponse)
async def delete_expense(
    entry_id: int,
    current_user: User = Depends(require_expenses),
    db: Session = Depends(get_db)
):
    ExpenseService(db).delete(entry_id)
    return DeleteResponse(message="Expense deleted", id=entry_id)
