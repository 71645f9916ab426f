"""
Common response schemas.
"""

from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Generic error response."""

    success: bool = False
    message: str
    detail: Optional[str] = None


class DeleteResponse(BaseModel):
    """Result of a delete operation."""

    success: bool = True
    message: str
    id: int
