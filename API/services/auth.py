"""
Authentication service.
Handles login, token issuance and user management.
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy import or_

from core.config import settings
from core.exceptions import ConflictError, NotFoundError
from core.security import verify_password, hash_password, create_access_token
from database.models import User
from schemas.auth import UserCreate, UserUpdate
from .base import ServiceBase


class AuthService(ServiceBase):
    """Authentication service class."""

    def authenticate_user(self, username: str, password: str) -> Optional[User]:
        """
        Authenticate user with username and password.

        Returns None for an unknown user, a wrong password or an inactive
        account alike, so callers cannot tell the causes apart.
        """
        user = self._q(User).filter(User.username == username.strip()).first()

        if not user:
            return None

        if not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for '{username}'")
            return None

        if not user.is_active:
            return None

        return user

    def create_token(self, user: User) -> str:
        return create_access_token(user)

    @property
    def token_expires_in(self) -> int:
        return settings.access_token_expire_minutes * 60

    def create_user(self, data: UserCreate) -> User:
        existing = self._q(User).filter(or_(
            User.username == data.username,
            User.email == data.email,
        )).first()
        if existing:
            raise ConflictError("Username or email already exists")

        user = User(
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password),
            role=data.role,
            permissions=[p.value for p in data.permissions] if data.permissions else [],
            is_active=data.is_active,
        )
        with self.transaction():
            self.db.add(user)
        self.db.refresh(user)
        logger.info(f"User created: {user.username} ({user.role.value})")
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self._get(User, user_id)

    def list_users(self) -> List[User]:
        return self._q(User).order_by(User.id).all()

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        """
        Change role, permissions, activation or password. A role change
        invalidates the user's outstanding tokens.
        """
        user = self.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if 'password' in update_data:
            update_data['password_hash'] = hash_password(update_data.pop('password'))
        if 'permissions' in update_data:
            update_data['permissions'] = [p.value for p in update_data['permissions']]

        with self.transaction():
            for key, value in update_data.items():
                setattr(user, key, value)
        self.db.refresh(user)
        logger.info(f"User updated: {user.username} ({user.role.value})")
        return user
