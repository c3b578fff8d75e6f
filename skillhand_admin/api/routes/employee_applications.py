"""Employee application review endpoints."""

from typing import Optional

from fastapi import APIRouter, Query

from skillhand_admin.api.dependencies import (
    CurrentUserDep,
    EmployeeApplicationClientDep,
    ReviewUseCaseDep,
)
from skillhand_admin.api.schemas.employee_application import (
    EmployeeApplicationActionResponse,
    EmployeeApplicationCard,
    EmployeeApplicationListResponse,
)
from skillhand_admin.application.interfaces.gateways import (
    EmployeeApplicationGateway,
)
from skillhand_admin.application.services.record_filter import (
    filter_employee_applications,
)
from skillhand_admin.domain.entities.employee_application import (
    EmployeeApplication,
)
from skillhand_admin.domain.exceptions.validation_error import RecordNotFoundError

router = APIRouter(prefix="/employee-applications", tags=["employee-applications"])


async def _get_application(
    gateway: EmployeeApplicationGateway, application_id: str
) -> EmployeeApplication:
    for application in await gateway.list_all():
        if application.id == application_id:
            return application
    raise RecordNotFoundError("Employee application", application_id)


def _action_response(
    message: str, updated: Optional[EmployeeApplication]
) -> EmployeeApplicationActionResponse:
    return EmployeeApplicationActionResponse(
        message=message,
        data=EmployeeApplicationCard.from_entity(updated) if updated else None,
    )


@router.get("", response_model=EmployeeApplicationListResponse)
async def list_employee_applications(
    client: EmployeeApplicationClientDep,
    user: CurrentUserDep,
    q: str = Query(""),
    status: Optional[str] = Query(None),
    experience: Optional[str] = Query(None),
):
    """Applications matching the search text, status and experience level."""
    applications = await client.list_all()
    visible = filter_employee_applications(applications, q, status, experience)
    return EmployeeApplicationListResponse(
        items=[EmployeeApplicationCard.from_entity(app) for app in visible],
        total=len(applications),
    )


@router.post(
    "/{application_id}/approve", response_model=EmployeeApplicationActionResponse
)
async def approve_employee_application(
    application_id: str,
    client: EmployeeApplicationClientDep,
    use_case: ReviewUseCaseDep,
    user: CurrentUserDep,
):
    application = await _get_application(client, application_id)
    updated = await use_case.approve(application)
    return _action_response("Employee application approved", updated)


@router.post(
    "/{application_id}/reject", response_model=EmployeeApplicationActionResponse
)
async def reject_employee_application(
    application_id: str,
    client: EmployeeApplicationClientDep,
    use_case: ReviewUseCaseDep,
    user: CurrentUserDep,
):
    application = await _get_application(client, application_id)
    updated = await use_case.reject(application)
    return _action_response("Employee application rejected", updated)
