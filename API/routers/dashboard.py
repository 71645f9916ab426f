"""
Dashboard router.
Endpoint: /api/v1/dashboard/...
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, PermissionType
from core.dependencies import require_section
from schemas.report import DashboardStats
from services.dashboard import DashboardService


router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    current_user: User = Depends(require_section(PermissionType.DASHBOARD)),
    db: Session = Depends(get_db)
):
    """Client counts, outstanding debt and this month's revenue."""
    return DashboardStats(**DashboardService(db).get_stats())
