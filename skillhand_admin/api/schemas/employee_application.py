"""
Employee application API schemas.
"""

from typing import List, Optional

from pydantic import BaseModel

from skillhand_admin.domain.entities.employee_application import (
    EmployeeApplication,
)
from skillhand_admin.domain.value_objects.application_status import (
    ApplicationStatus,
)

from .common import BaseResponse

STATUS_VARIANTS = {
    ApplicationStatus.PENDING: "warning",
    ApplicationStatus.APPROVED: "success",
    ApplicationStatus.REJECTED: "destructive",
}


class EmployeeApplicationCard(BaseModel):
    """One application as rendered in the review list."""

    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    profile_image: Optional[str] = None
    skills: List[str]
    experience_level: str
    rating: float
    previous_job_count: int
    certifications: List[str]
    expected_salary: Optional[float] = None
    status: str
    status_variant: str
    applied_date: Optional[str] = None
    location: str
    available_actions: List[str]

    @classmethod
    def from_entity(
        cls, application: EmployeeApplication
    ) -> "EmployeeApplicationCard":
        actions = ["view-details"]
        if application.status == ApplicationStatus.PENDING:
            actions = ["approve", "reject"] + actions

        return cls(
            id=application.id,
            name=application.name,
            phone=application.phone,
            email=application.email,
            profile_image=application.profile_image,
            skills=list(application.skills),
            experience_level=application.experience_level.value,
            rating=application.rating,
            previous_job_count=application.previous_job_count,
            certifications=list(application.certifications),
            expected_salary=application.expected_salary,
            status=application.status.value,
            status_variant=STATUS_VARIANTS.get(application.status, "secondary"),
            applied_date=application.applied_date,
            location=application.location,
            available_actions=actions,
        )


class EmployeeApplicationListResponse(BaseModel):
    items: List[EmployeeApplicationCard]
    total: int


class EmployeeApplicationActionResponse(BaseResponse):
    """Outcome of a review decision."""

    data: Optional[EmployeeApplicationCard] = None
