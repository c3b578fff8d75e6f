"""
Authentication API schemas.
"""

from typing import Optional

from pydantic import BaseModel

from skillhand_admin.domain.entities.admin_user import AdminUser


class LoginRequest(BaseModel):
    """Login request schema."""

    user_type: str = "admin"


class UserResponse(BaseModel):
    """Logged-in admin user."""

    id: str
    name: str
    email: str
    role: str
    avatar: Optional[str] = None

    @classmethod
    def from_entity(cls, user: AdminUser) -> "UserResponse":
        return cls(**user.to_dict())
