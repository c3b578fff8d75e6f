"""
Admin login session.
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog

from skillhand_admin.application.interfaces.auth import CurrentUserProvider
from skillhand_admin.domain.entities.admin_user import AdminUser

logger = structlog.get_logger()

USER_TYPES = ("guest", "demo", "admin")

DEFAULT_ADMIN = AdminUser(
    id="admin-001",
    name="Admin User",
    email="admin@skillhand.com",
    role="Administrator",
    avatar="/placeholder-avatar.jpg",
)


class AuthSession(CurrentUserProvider):
    """Holds the logged-in admin, optionally persisted to a JSON file."""

    def __init__(self, session_file: Optional[Union[str, Path]] = None):
        self.session_file = Path(session_file) if session_file else None
        self._user: Optional[AdminUser] = self._load()

    @property
    def current_user(self) -> Optional[AdminUser]:
        return self._user

    def login(self, user_type: str = "admin") -> AdminUser:
        """Log in as one of the built-in account types.

        Every type currently resolves to the same administrator account.
        """
        if user_type not in USER_TYPES:
            raise ValueError(f"Unknown user type '{user_type}'")

        self._user = DEFAULT_ADMIN
        self._save()
        logger.info("Admin logged in", user_id=self._user.id, user_type=user_type)
        return self._user

    def logout(self) -> None:
        if self._user is not None:
            logger.info("Admin logged out", user_id=self._user.id)
        self._user = None
        if self.session_file and self.session_file.exists():
            self.session_file.unlink()

    def _load(self) -> Optional[AdminUser]:
        if not self.session_file or not self.session_file.exists():
            return None
        try:
            data = json.loads(self.session_file.read_text())
            return AdminUser(**data)
        except (ValueError, TypeError) as e:
            logger.warning(
                "Ignoring unreadable session file",
                path=str(self.session_file),
                error=str(e),
            )
            return None

    def _save(self) -> None:
        if not self.session_file or self._user is None:
            return
        self.session_file.parent.mkdir(parents=True, exist_ok=True)
        self.session_file.write_text(json.dumps(self._user.to_dict()))
