"""Admin user domain entity."""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class AdminUser:
    """Logged-in dashboard operator."""

    id: str
    name: str
    email: str
    role: str
    avatar: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
