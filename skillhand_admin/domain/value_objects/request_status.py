"""
Service request status value object.
"""

from enum import Enum
from typing import Optional

LEGACY_IN_PROGRESS = "in-progress"


def normalize_status(label: Optional[str]) -> Optional[str]:
    """Map the legacy 'in-progress' label onto 'in-process'.

    Any other value is returned unchanged (lower-cased and stripped when it is
    a string) so comparisons and filters work on one vocabulary.
    """
    if not isinstance(label, str):
        return label
    cleaned = label.strip().lower()
    if cleaned == LEGACY_IN_PROGRESS:
        return RequestStatus.IN_PROCESS.value
    return cleaned


class RequestStatus(str, Enum):
    """Service request status enumeration."""

    PENDING = "pending"
    IN_PROCESS = "in-process"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REJECTED = "rejected"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "RequestStatus":
        """Parse a backend label, accepting the legacy 'in-progress' synonym."""
        return cls(normalize_status(label))

    def allowed_transitions(self) -> tuple:
        """Statuses reachable from this one."""
        return _TRANSITIONS[self]

    def can_transition_to(self, target: "RequestStatus") -> bool:
        """Check whether the lifecycle allows moving to target."""
        return target in self.allowed_transitions()

    def is_final(self) -> bool:
        """Check if status is final (no more transitions)."""
        return not self.allowed_transitions()

    def is_open(self) -> bool:
        """Check if the request still needs attention."""
        return self in [self.PENDING, self.IN_PROCESS]


_TRANSITIONS = {
    RequestStatus.PENDING: (RequestStatus.IN_PROCESS, RequestStatus.CANCELLED),
    RequestStatus.IN_PROCESS: (RequestStatus.COMPLETED,),
    RequestStatus.COMPLETED: (),
    RequestStatus.CANCELLED: (),
    RequestStatus.REJECTED: (),
}
