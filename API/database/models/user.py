"""
User model for authentication and authorization.
Role-based Access Control (RBAC): every API operation belongs to a
section, and a role grants a fixed set of sections.
"""

from enum import Enum as PyEnum
from sqlalchemy import Column, String, Boolean, Enum, JSON

from ..base import BaseModel, TimestampMixin


class UserRole(str, PyEnum):
    """Predefined role types."""
    manager = "manager"
    collector = "collector"
    support_technician = "support_technician"
    custom = "custom"


class PermissionType(str, PyEnum):
    """Sections of the system a user may operate on."""
    DASHBOARD = "dashboard"
    CLIENTS = "clients"
    PACKAGES = "packages"
    INVOICES = "invoices"
    PAYMENTS = "payments"
    EXPENSES = "expenses"
    INCOME = "income"
    REPORTS = "reports"
    SETTINGS = "settings"


ROLE_PERMISSIONS = {
    UserRole.manager: set(PermissionType),
    UserRole.collector: {
        PermissionType.DASHBOARD,
        PermissionType.CLIENTS,
        PermissionType.INVOICES,
        PermissionType.PAYMENTS,
    },
    UserRole.support_technician: {
        PermissionType.DASHBOARD,
        PermissionType.EXPENSES,
        PermissionType.INCOME,
    },
}


class User(BaseModel, TimestampMixin):
    """System user. Username and email are unique."""

    __tablename__ = 'users'

    username = Column(String(100), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    role = Column(Enum(UserRole), nullable=False)
    # Only consulted for the custom role
    permissions = Column(JSON, default=list, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)

    def has_permission(self, permission: PermissionType) -> bool:
        if not self.is_active:
            return False
        if self.role == UserRole.custom:
            return permission.value in (self.permissions or [])
        return permission in ROLE_PERMISSIONS.get(self.role, set())
