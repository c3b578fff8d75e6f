"""Service request endpoints."""

from typing import Optional

from fastapi import APIRouter, Query

from skillhand_admin.api.dependencies import (
    CompleteUseCaseDep,
    CurrentUserDep,
    DisconnectTokenDep,
    RejectUseCaseDep,
    ScheduleUseCaseDep,
    ServiceRequestQueriesDep,
)
from skillhand_admin.api.schemas.common import PageMeta
from skillhand_admin.api.schemas.service_request import (
    ScheduleRequestBody,
    ServiceRequestActionResponse,
    ServiceRequestCard,
    ServiceRequestListResponse,
    ServiceRequestSummaryResponse,
)
from skillhand_admin.application.services.record_filter import (
    filter_service_requests,
)
from skillhand_admin.application.services.service_request_queries import (
    ServiceRequestQueries,
)
from skillhand_admin.config.logging import get_logger
from skillhand_admin.config.settings import settings
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.exceptions.validation_error import RecordNotFoundError

logger = get_logger(__name__)
router = APIRouter(prefix="/service-requests", tags=["service-requests"])


async def _get_request(
    queries: ServiceRequestQueries, request_id: str
) -> ServiceRequest:
    request = await queries.find(request_id)
    if request is None:
        raise RecordNotFoundError("Service request", request_id)
    return request


def _action_response(
    message: str, updated: Optional[ServiceRequest]
) -> ServiceRequestActionResponse:
    return ServiceRequestActionResponse(
        message=message,
        data=ServiceRequestCard.from_entity(updated) if updated else None,
    )


@router.get("", response_model=ServiceRequestListResponse)
async def list_service_requests(
    queries: ServiceRequestQueriesDep,
    user: CurrentUserDep,
    cancel: DisconnectTokenDep,
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
    q: str = Query(""),
    status: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
):
    """One page of requests, filtered by search text, status and priority.

    Filters apply to the fetched page only; they never reach the backend.
    """
    result = await queries.page(page, limit, cancel=cancel)
    visible = filter_service_requests(result.items, q, status, priority)

    return ServiceRequestListResponse(
        items=[ServiceRequestCard.from_entity(request) for request in visible],
        meta=PageMeta(
            page=result.page,
            limit=result.limit,
            total=result.total,
            has_more=result.has_more,
            fetched=len(result.items),
        ),
    )


@router.get("/summary", response_model=ServiceRequestSummaryResponse)
async def service_request_summary(
    queries: ServiceRequestQueriesDep,
    user: CurrentUserDep,
    cancel: DisconnectTokenDep,
):
    """Counts for the summary tiles."""
    counts = await queries.status_counts(cancel=cancel)
    return ServiceRequestSummaryResponse.from_counts(counts)


@router.post("/{request_id}/accept", response_model=ServiceRequestActionResponse)
async def accept_service_request(
    request_id: str,
    body: ScheduleRequestBody,
    queries: ServiceRequestQueriesDep,
    use_case: ScheduleUseCaseDep,
    user: CurrentUserDep,
):
    """Accept a pending request for the given date."""
    request = await _get_request(queries, request_id)
    updated = await use_case.execute(request, body.scheduled_date)
    return _action_response("Service request scheduled", updated)


@router.post("/{request_id}/reject", response_model=ServiceRequestActionResponse)
async def reject_service_request(
    request_id: str,
    queries: ServiceRequestQueriesDep,
    use_case: RejectUseCaseDep,
    user: CurrentUserDep,
):
    request = await _get_request(queries, request_id)
    updated = await use_case.execute(request)
    return _action_response("Service request rejected", updated)


@router.post("/{request_id}/complete", response_model=ServiceRequestActionResponse)
async def complete_service_request(
    request_id: str,
    queries: ServiceRequestQueriesDep,
    use_case: CompleteUseCaseDep,
    user: CurrentUserDep,
):
    request = await _get_request(queries, request_id)
    updated = await use_case.execute(request)
    return _action_response("Service request completed", updated)
