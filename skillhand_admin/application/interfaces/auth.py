"""
Current-user capability injected into the view layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from skillhand_admin.domain.entities.admin_user import AdminUser


class CurrentUserProvider(ABC):
    """Source of the logged-in admin user."""

    @property
    @abstractmethod
    def current_user(self) -> Optional[AdminUser]:
        """The logged-in user, or None."""
        pass

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None
