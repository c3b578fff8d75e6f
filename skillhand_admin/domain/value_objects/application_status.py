"""
Employee application status and experience value objects.
"""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Employee application status enumeration."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    def is_final(self) -> bool:
        """Approved and rejected applications are never reviewed again."""
        return self in [self.APPROVED, self.REJECTED]

    def can_transition_to(self, target: "ApplicationStatus") -> bool:
        """Only pending applications can be approved or rejected."""
        return self == self.PENDING and target.is_final()


class ExperienceLevel(str, Enum):
    """Applicant experience level enumeration."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"
