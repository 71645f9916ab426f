"""
Expense and other-income schemas.
"""

from typing import Optional, List
import datetime as dt
from pydantic import BaseModel, Field

from database.models import ExpenseType, IncomeType


class ExpenseCreate(BaseModel):

    type: ExpenseType
    amount: float = Field(..., gt=0)
    date: dt.date
    description: Optional[str] = None


class ExpenseUpdate(BaseModel):

    type: Optional[ExpenseType] = None
    amount: Optional[float] = Field(None, gt=0)
    date: Optional[dt.date] = None
    description: Optional[str] = None


class ExpenseResponse(BaseModel):

    id: int
    type: ExpenseType
    amount: float
    date: dt.date
    description: Optional[str] = None
    created_at: dt.datetime

    model_config = {"from_attributes": True}


class IncomeCreate(BaseModel):

    type: IncomeType
    amount: float = Field(..., gt=0)
    date: dt.date
    description: Optional[str] = None


class IncomeUpdate(BaseModel):

    type: Optional[IncomeType] = None
    amount: Optional[float] = Field(None, gt=0)
    date: Optional[dt.date] = None
    description: Optional[str] = None


class IncomeResponse(BaseModel):

    id: int
    type: IncomeType
    amount: float
    date: dt.date
    description: Optional[str] = None
    created_at: dt.datetime

    model_config = {"from_attributes": True}


class ExpenseListResponse(BaseModel):

    data: List[ExpenseResponse]
    total: int


class IncomeListResponse(BaseModel):

    data: List[IncomeResponse]
    total: int


class LedgerTotalResponse(BaseModel):

    total: float
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
