"""
User management router. Managers only.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, UserRole
from core.dependencies import require_role
from schemas.auth import UserCreate, UserUpdate, UserInfo, UserListResponse
from services.auth import AuthService


router = APIRouter()

require_manager = require_role(UserRole.manager)


@router.get("", response_model=UserListResponse)
async def list_users(
    current_user: User = Depends(require_manager),
    db: Session = Depends(get_db)
):
    users = AuthService(db).list_users()
    return UserListResponse(data=users, total=len(users))


@router.post("", response_model=UserInfo, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    current_user: User = Depends(require_manager),
    db: Session = Depends(get_db)
):
    """Create a user. Username and email must be unique."""
    return AuthService(db).create_user(data)


@router.get("/{user_id}", response_model=UserInfo)
async def get_user(
    user_id: int,
    current_user: User = Depends(require_manager),
    db: Session = Depends(get_db)
):
    user = AuthService(db).get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.patch("/{user_id}", response_model=UserInfo)
async def update_user(
    user_id: int,
    data: UserUpdate,
    current_user: User = Depends(require_manager),
    db: Session = Depends(get_db)
):
    """Change a user's role, permissions, activation or password."""
    return AuthService(db).update_user(user_id, data)
