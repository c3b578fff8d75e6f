"""
Priority value object.
"""

from enum import Enum


class Priority(str, Enum):
    """Service request priority enumeration."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def is_urgent(self) -> bool:
        """Check if requests with this priority count as urgent."""
        return self == self.HIGH
