"""
Authentication and user schemas.
"""

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator

from database.models import UserRole, PermissionType


class LoginRequest(BaseModel):

    username: str
    password: str


class UserCreate(BaseModel):
    """Create a system user. Permissions only matter for the custom role."""

    username: str = Field(..., min_length=3)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole
    permissions: Optional[List[PermissionType]] = None
    is_active: bool = True

    @field_validator("username")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        return v.strip()


class UserUpdate(BaseModel):
    """Manager-side account change. Only fields that are sent are changed."""

    role: Optional[UserRole] = None
    permissions: Optional[List[PermissionType]] = None
    is_active: Optional[bool] = None
    password: Optional[str] = Field(None, min_length=6)


class UserInfo(BaseModel):
    """User data returned to clients. Never includes the password hash."""

    id: int
    username: str
    email: str
    role: UserRole
    permissions: List[str] = []
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("permissions", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v or []


class UserListResponse(BaseModel):

    data: List[UserInfo]
    total: int


class LoginResponse(BaseModel):

    success: bool = True
    message: str
    user: UserInfo
    access_token: str
    token_type: str = "bearer"
    expires_in: int
