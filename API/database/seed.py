"""
Database seed - creates the first manager account on first run.
"""
from loguru import logger
from sqlalchemy.orm import Session

from core.config import settings
from .models import User, UserRole


def seed_manager(session: Session):
    """Create default manager if the users table is empty."""
    from core.security import hash_password

    if session.query(User).first():
        logger.info("ℹ️  Users already exist, skipping seed")
        return

    session.add(User(
        username=settings.default_admin_username,
        email=settings.default_admin_email,
        password_hash=hash_password(settings.default_admin_password),
        role=UserRole.manager,
        permissions=[],
        is_active=True,
    ))
    session.commit()
    logger.info(f"✅ Manager account created (username={settings.default_admin_username})")


def seed_all(session: Session):
    """Main seed entry point."""
    seed_manager(session)
