"""
Package catalog schemas.
"""

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field

from database.models import BillingCycle, PackageStatus


class PackageCreate(BaseModel):
    """Create a service package."""

    name: str = Field(..., min_length=1)
    speed: str
    monthly_price: float = Field(..., gt=0)
    billing_cycle: BillingCycle
    days_allowed: int = Field(..., ge=0)
    description: Optional[str] = None


class PackageUpdate(BaseModel):
    """Partial package update. Only fields that are sent are changed."""

    name: Optional[str] = Field(None, min_length=1)
    speed: Optional[str] = None
    monthly_price: Optional[float] = Field(None, gt=0)
    billing_cycle: Optional[BillingCycle] = None
    status: Optional[PackageStatus] = None
    days_allowed: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None


class PackageResponse(BaseModel):

    id: int
    name: str
    speed: str
    monthly_price: float
    billing_cycle: BillingCycle
    status: PackageStatus
    days_allowed: int
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PackageListResponse(BaseModel):

    data: List[PackageResponse]
    total: int
