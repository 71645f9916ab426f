"""
Base model class and common mixins for all database models.
"""

from datetime import datetime, date, timezone, timedelta
from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.orm import declarative_base

from core.config import settings

Base = declarative_base()

# Business timezone (UTC+3 by default)
LOCAL_TZ = timezone(timedelta(hours=settings.tz_offset_hours))


def get_local_now() -> datetime:
    """Get current time in the business timezone (as naive datetime)."""
    return datetime.now(LOCAL_TZ).replace(tzinfo=None)


def get_local_today() -> date:
    return get_local_now().date()


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps."""

    created_at = Column(DateTime, default=get_local_now, nullable=False)
    updated_at = Column(DateTime, default=get_local_now, onupdate=get_local_now, nullable=False)


class CreatedAtMixin:
    """Mixin for append-only records that are never updated."""

    created_at = Column(DateTime, default=get_local_now, nullable=False, index=True)


class BaseModel(Base):
    """Abstract base model with an integer primary key."""

    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id})>"
