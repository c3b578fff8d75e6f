"""Employee application domain entity."""

from dataclasses import dataclass, field
from typing import List, Optional

from skillhand_admin.domain.value_objects.application_status import (
    ApplicationStatus,
    ExperienceLevel,
)


@dataclass
class EmployeeApplication:
    """Job-seeker application to join the service workforce."""

    id: str
    name: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None
    profile_image: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER
    rating: float = 0.0
    previous_job_count: int = 0
    certifications: List[str] = field(default_factory=list)
    expected_salary: Optional[float] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_date: Optional[str] = None
    location: str = ""

    def can_transition_to(self, target: ApplicationStatus) -> bool:
        """Check if the application can still be reviewed into target."""
        return self.status.can_transition_to(target)

    @property
    def primary_skills(self) -> List[str]:
        """First two skills, as shown on dashboard summaries."""
        return self.skills[:2]
