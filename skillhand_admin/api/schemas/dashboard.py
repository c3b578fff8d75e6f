"""
Dashboard API schemas.
"""

from typing import List

from pydantic import BaseModel

from skillhand_admin.application.services.dashboard_stats import DashboardStats

from .employee_application import EmployeeApplicationCard
from .service_request import ServiceRequestCard


class DashboardStatsSchema(BaseModel):
    """Headline numbers."""

    total_service_requests: int
    active_employees: int
    completed_today: int
    pending_requests: int
    employee_applications: int
    urgent_requests: int

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> "DashboardStatsSchema":
        return cls(
            total_service_requests=stats.total_service_requests,
            active_employees=stats.active_employees,
            completed_today=stats.completed_today,
            pending_requests=stats.pending_requests,
            employee_applications=stats.employee_applications,
            urgent_requests=stats.urgent_requests,
        )


class DashboardResponse(BaseModel):
    stats: DashboardStatsSchema
    counts_source: str
    recent_requests: List[ServiceRequestCard]
    recent_applications: List[EmployeeApplicationCard]
