"""
FastAPI dependencies for authentication and authorization.

Every route resolves the caller from its bearer token and then checks the
caller's section or role. Nothing here trusts the UI.
"""

from typing import Callable
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from database import get_db
from database.models import User, UserRole, PermissionType
from .security import read_access_token


bearer_scheme = HTTPBearer()


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the calling staff account.

    401 when the token is invalid, the account is gone, or the account's
    role changed after the token was issued. 403 when the account is
    deactivated.
    """
    token_data = read_access_token(credentials.credentials)
    if token_data is None:
        raise _unauthorized()

    user = db.get(User, token_data.user_id)
    if user is None or not token_data.matches(user):
        raise _unauthorized()

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is inactive"
        )
    return user


def require_section(section: PermissionType) -> Callable:
    """
    Dependency granting access to one business section.

    Usage:
        current_user: User = Depends(require_section(PermissionType.CLIENTS))
    """
    async def check(current_user: User = Depends(get_current_user)) -> User:
        if not current_user.has_permission(section):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {section.value}"
            )
        return current_user

    return check


def require_role(*roles: UserRole) -> Callable:
    """Dependency restricting a route to the given roles (user admin)."""
    async def check(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You are not allowed to perform this action"
            )
        return current_user

    return check
