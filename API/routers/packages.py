"""
Package catalog router.
Endpoint: /api/v1/packages/...
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, PermissionType
from core.dependencies import require_section
from schemas.base import DeleteResponse
from schemas.package import (
    PackageCreate, PackageUpdate, PackageResponse, PackageListResponse
)
from services.package import PackageService


router = APIRouter()

require_packages = require_section(PermissionType.PACKAGES)


@router.get("", response_model=PackageListResponse)
async def list_packages(
    current_user: User = Depends(require_packages),
    db: Session = Depends(get_db)
):
    packages = PackageService(db).list_packages()
    return PackageListResponse(data=packages, total=len(packages))


@router.get("/active", response_model=PackageListResponse)
async def list_active_packages(
    current_user: User = Depends(require_section(PermissionType.CLIENTS)),
    db: Session = Depends(get_db)
):
    """Packages a client can be subscribed to (used by client forms)."""
    packages = PackageService(db).list_active_packages()
    return PackageListResponse(data=packages, total=len(packages))


@router.post("", response_model=PackageResponse, status_code=status.HTTP_201_CREATED)
async def create_package(
    data: PackageCreate,
    current_user: User = Depends(require_packages),
    db: Session = Depends(get_db)
):
    return PackageService(db).create_package(data)


@router.get("/{package_id}", response_model=PackageResponse)
async def get_package(
    package_id: int,
    current_user: User = Depends(require_packages),
    db: Session = Depends(get_db)
):
    package = PackageService(db).get_package(package_id)
    if not package:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Package not found"
        )
    return package


@router.put("/{package_id}", response_model=PackageResponse)
async def update_package(
    package_id: int,
    data: PackageUpdate,
    current_user: User = Depends(require_packages),
    db: Session = Depends(get_db)
):
    return PackageService(db).update_package(package_id, data)


@router.delete("/{package_id}", response_model=DeleteResponse)
async def delete_package(
    package_id: int,
    current_user: User = Depends(require_packages),
    db: Session = Depends(get_db)
):
    """Delete a package. 409 while clients are subscribed to it."""
    PackageService(db).delete_package(package_id)
    return DeleteResponse(message="Package deleted", id=package_id)
