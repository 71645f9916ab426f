"""
Company settings router.
Endpoint: /api/v1/settings
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, PermissionType
from core.dependencies import require_section
from schemas.settings import CompanySettingsUpdate, CompanySettingsResponse
from services.settings import SettingsService


router = APIRouter()

require_settings = require_section(PermissionType.SETTINGS)


@router.get("", response_model=CompanySettingsResponse)
async def get_company_settings(
    current_user: User = Depends(require_settings),
    db: Session = Depends(get_db)
):
    company = SettingsService(db).get_company_settings()
    if not company:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company settings not configured"
        )
    return company


@router.put("", response_model=CompanySettingsResponse)
async def update_company_settings(
    data: CompanySettingsUpdate,
    current_user: User = Depends(require_settings),
    db: Session = Depends(get_db)
):
    """Update settings, creating them with defaults on first use."""
    return SettingsService(db).update_company_settings(data)
