"""
Income ledger router.
Endpoint: /api/v1/incomes/...
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
    IncomeCreate, IncomeUpdate, IncomeResponse, IncomeListResponse, LedgerTotalResponse
)
from services.finance import IncomeService


router = APIRouter()

require_incomes = require_section(PermissionType.INCOME)


@router.get("", response_model=IncomeListResponse)
async def list_incomes(
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    current_user: User = Depends(require_incomes),
    db: Session = Depends(get_db)
):
    entries = IncomeService(db).list(date_from, date_to)
    return IncomeListResponse(data=entries, total=len(entries))


@router.get("/total", response_model=LedgerTotalResponse)
async def get_income_total(
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    current_user: User = Depends(require_incomes),
    db: Session = Depends(get_db)
):
    total = IncomeService(db).get_total(date_from, date_to)
    return LedgerTotalResponse(total=float(total), date_from=date_from, date_to=date_to)


@router.post("", response_model=IncomeResponse, status_code=status.HTTP_201_CREATED)
async def create_income(
    data: IncomeCreate,
    current_user: User = Depends(require_incomes),
    db: Session = Depends(get_db)
):
    return IncomeService(db).create(data)


@router.get("/{entry_id}", response_model=IncomeResponse)
async def get_income(
    entry_id: int,
    current_user: User = Depends(require_incomes),
    db: Session = Depends(get_db)
):
    entry = IncomeService(db).get(entry_id)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Income not found"
        )
    return entry


@router.put("/{entry_id}", response_model=IncomeResponse)
async def update_income(
    entry_id: int,
    data: IncomeUpdate,
    current_user: User = Depends(require_incomes),
    db: Session = Depends(get_db)
):
    return IncomeService(db).update(entry_id, data)


@router.delete("/{entry_id}", response_model=DeleteResponse)
async def delete_income(
    entry_id: int,
    current_user: User = Depends(require_incomes),
    db: Session = Depends(get_db)
):
    IncomeService(db).delete(entry_id)
    return DeleteResponse(message="Income deleted", id=entry_id)
