"""
FastAPI dependency injection container.
"""

import asyncio
from functools import lru_cache
from typing import Annotated, AsyncIterator

from fastapi import Depends, HTTPException, Request, status

from skillhand_admin.application.services.auth_session import AuthSession
from skillhand_admin.application.services.dashboard_stats import (
    DashboardStatsService,
)
from skillhand_admin.application.services.query_cache import QueryCache
from skillhand_admin.application.services.service_request_queries import (
    ServiceRequestQueries,
)
from skillhand_admin.application.use_cases.complete_service_request import (
    CompleteServiceRequestUseCase,
)
from skillhand_admin.application.use_cases.reject_service_request import (
    RejectServiceRequestUseCase,
)
from skillhand_admin.application.use_cases.review_employee_application import (
    ReviewEmployeeApplicationUseCase,
)
from skillhand_admin.application.use_cases.schedule_service_request import (
    ScheduleServiceRequestUseCase,
)
from skillhand_admin.config.logging import get_logger
from skillhand_admin.config.settings import settings
from skillhand_admin.domain.entities.admin_user import AdminUser
from skillhand_admin.infrastructure.backend.employee_application_client import (
    EmployeeApplicationClient,
)
from skillhand_admin.infrastructure.backend.service_request_client import (
    ServiceRequestClient,
)
from skillhand_admin.infrastructure.external.cancellation import CancelToken
from skillhand_admin.infrastructure.external.http_client import ApiTransport

logger = get_logger(__name__)


# Process-wide singletons
@lru_cache
def get_transport() -> ApiTransport:
    """Get the shared backend transport."""
    return ApiTransport(settings.API_BASE_URL, timeout=settings.HTTP_TIMEOUT)


@lru_cache
def get_service_request_queries() -> ServiceRequestQueries:
    """Get the cached service request queries."""
    return ServiceRequestQueries(
        ServiceRequestClient(get_transport()),
        cache=QueryCache(ttl_seconds=settings.QUERY_CACHE_TTL_SECONDS),
        page_size=settings.DEFAULT_PAGE_SIZE,
    )


@lru_cache
def get_employee_application_client() -> EmployeeApplicationClient:
    """Get employee application client instance."""
    return EmployeeApplicationClient(get_transport())


@lru_cache
def get_auth_session() -> AuthSession:
    """Get the admin login session."""
    return AuthSession(settings.SESSION_FILE)


async def close_backend() -> None:
    """Close the shared transport if it was ever opened."""
    if get_transport.cache_info().currsize:
        await get_transport().aclose()
        get_transport.cache_clear()
        logger.info("Backend transport closed")


# Service Dependencies
async def get_dashboard_stats_service() -> DashboardStatsService:
    """Get dashboard stats service instance."""
    return DashboardStatsService()


async def get_schedule_use_case(
    queries: ServiceRequestQueries = Depends(get_service_request_queries),
) -> ScheduleServiceRequestUseCase:
    return ScheduleServiceRequestUseCase(queries.gateway, queries)


async def get_reject_use_case(
    queries: ServiceRequestQueries = Depends(get_service_request_queries),
) -> RejectServiceRequestUseCase:
    return RejectServiceRequestUseCase(queries.gateway, queries)


async def get_complete_use_case(
    queries: ServiceRequestQueries = Depends(get_service_request_queries),
) -> CompleteServiceRequestUseCase:
    return CompleteServiceRequestUseCase(queries.gateway, queries)


async def get_review_use_case(
    client: EmployeeApplicationClient = Depends(get_employee_application_client),
) -> ReviewEmployeeApplicationUseCase:
    return ReviewEmployeeApplicationUseCase(client)


# Request scope
async def get_disconnect_token(request: Request) -> AsyncIterator[CancelToken]:
    """Cancel token that fires when the client disconnects mid-request."""
    token = CancelToken()

    async def watch_disconnect() -> None:
        while True:
            message = await request.receive()
            if message["type"] == "http.disconnect":
                logger.debug("Client disconnected", path=request.url.path)
                token.cancel()
                return

    watcher = asyncio.ensure_future(watch_disconnect())
    try:
        yield token
    finally:
        watcher.cancel()


# Authentication
async def get_current_user(
    session: AuthSession = Depends(get_auth_session),
) -> AdminUser:
    """Require a logged-in admin."""
    user = session.current_user
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


# Type aliases for cleaner dependency injection
TransportDep = Annotated[ApiTransport, Depends(get_transport)]
ServiceRequestQueriesDep = Annotated[
    ServiceRequestQueries, Depends(get_service_request_queries)
]
EmployeeApplicationClientDep = Annotated[
    EmployeeApplicationClient, Depends(get_employee_application_client)
]
AuthSessionDep = Annotated[AuthSession, Depends(get_auth_session)]
CurrentUserDep = Annotated[AdminUser, Depends(get_current_user)]
DisconnectTokenDep = Annotated[CancelToken, Depends(get_disconnect_token)]
DashboardStatsServiceDep = Annotated[
    DashboardStatsService, Depends(get_dashboard_stats_service)
]
ScheduleUseCaseDep = Annotated[
    ScheduleServiceRequestUseCase, Depends(get_schedule_use_case)
]
RejectUseCaseDep = Annotated[RejectServiceRequestUseCase, Depends(get_reject_use_case)]
CompleteUseCaseDep = Annotated[
    CompleteServiceRequestUseCase, Depends(get_complete_use_case)
]
ReviewUseCaseDep = Annotated[
    ReviewEmployeeApplicationUseCase, Depends(get_review_use_case)
]
