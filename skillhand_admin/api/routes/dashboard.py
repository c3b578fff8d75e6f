"""Dashboard endpoint."""

import asyncio

from fastapi import APIRouter

from skillhand_admin.api.dependencies import (
    CurrentUserDep,
    DashboardStatsServiceDep,
    EmployeeApplicationClientDep,
    ServiceRequestQueriesDep,
)
from skillhand_admin.api.schemas.dashboard import (
    DashboardResponse,
    DashboardStatsSchema,
)
from skillhand_admin.api.schemas.employee_application import (
    EmployeeApplicationCard,
)
from skillhand_admin.api.schemas.service_request import ServiceRequestCard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    queries: ServiceRequestQueriesDep,
    client: EmployeeApplicationClientDep,
    stats_service: DashboardStatsServiceDep,
    user: CurrentUserDep,
):
    """Headline numbers with the newest requests and applications."""
    requests, applications, counts = await asyncio.gather(
        queries.all_requests(),
        client.list_all(),
        queries.status_counts(),
    )
    stats = stats_service.compute(requests, applications, request_counts=counts)

    return DashboardResponse(
        stats=DashboardStatsSchema.from_stats(stats),
        counts_source=counts.source,
        recent_requests=[
            ServiceRequestCard.from_entity(request)
            for request in stats_service.recent_requests(requests)
        ],
        recent_applications=[
            EmployeeApplicationCard.from_entity(application)
            for application in stats_service.recent_applications(applications)
        ],
    )
