"""
Database package for the ISP billing system.

Usage:
    from database import db, get_db, init_db
    from database.models import Client, Invoice, Payment
"""

from .base import Base, BaseModel, TimestampMixin, CreatedAtMixin
from .connection import (
    DatabaseConnection,
    db,
    get_db,
    init_db,
)

# Import all models to ensure they are registered with SQLAlchemy
from .models import *


__all__ = [
    # Base
    'Base',
    'BaseModel',
    'TimestampMixin',
    'CreatedAtMixin',

    # Connection
    'DatabaseConnection',
    'db',
    'get_db',
    'init_db',
]
