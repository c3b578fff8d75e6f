"""
Common API schemas.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class BaseResponse(BaseModel):
    """Base response schema."""

    success: bool = True
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str
    message: Optional[str] = None
    type: str
    details: Optional[Dict[str, Any]] = None


class PageMeta(BaseModel):
    """Pagination metadata of one fetched page."""

    page: int
    limit: int
    total: Optional[int] = None
    has_more: bool
    fetched: int
