"""
Authentication router.
Handles login and the current-user lookup.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from database.models import User
from core.dependencies import get_current_user
from schemas.auth import LoginRequest, LoginResponse, UserInfo
from schemas.base import ErrorResponse
from services.auth import AuthService


router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    }
)
async def login(
    data: LoginRequest,
    db: Session = Depends(get_db)
):
    """Login with username and password. Returns a bearer token."""
    auth_service = AuthService(db)

    user = auth_service.authenticate_user(data.username, data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    return LoginResponse(
        success=True,
        message="Logged in successfully",
        user=UserInfo.model_validate(user),
        access_token=auth_service.create_token(user),
        token_type="bearer",
        expires_in=auth_service.token_expires_in,
    )


@router.get("/me", response_model=UserInfo)
async def get_current_user_info(
    current_user: User = Depends(get_current_user),
):
    """Get current authenticated user info."""
    return current_user
