"""
Company settings schemas.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class CompanySettingsUpdate(BaseModel):
    """Partial update. The first update creates the settings row."""

    company_name: Optional[str] = Field(None, min_length=1)
    logo_url: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    default_language: Optional[str] = None
    phone_country_code: Optional[str] = None
    currency_symbol: Optional[str] = None
    tax_rate: Optional[float] = Field(None, ge=0)


class CompanySettingsResponse(BaseModel):

    id: int
    company_name: str
    logo_url: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    default_language: str
    phone_country_code: str
    currency_symbol: str
    tax_rate: float
    updated_at: datetime

    model_config = {"from_attributes": True}
