"""Accept a pending service request by scheduling it."""

from datetime import datetime, timezone
from typing import Optional, Union

from skillhand_admin.application.interfaces.gateways import ServiceRequestGateway
from skillhand_admin.application.services.service_request_queries import (
    ServiceRequestQueries,
)
from skillhand_admin.config.logging import get_logger
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.exceptions.validation_error import (
    InvalidFormatError,
    InvalidStatusTransitionError,
    RequiredFieldError,
)
from skillhand_admin.domain.value_objects.request_status import RequestStatus

logger = get_logger(__name__)


def to_iso_timestamp(scheduled_at: Union[datetime, str]) -> str:
    """Render a scheduled date as an ISO-8601 UTC timestamp.

    Naive datetimes and strings without an offset are read as UTC.
    """
    if isinstance(scheduled_at, str):
        try:
            scheduled_at = datetime.fromisoformat(scheduled_at.replace("Z", "+00:00"))
        except ValueError:
            raise InvalidFormatError("scheduled_date", "ISO-8601 date and time")
    if scheduled_at.tzinfo is None:
        scheduled_at = scheduled_at.replace(tzinfo=timezone.utc)
    return (
        scheduled_at.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class ScheduleServiceRequestUseCase:
    """Move a pending request to in-process with a scheduled date."""

    def __init__(
        self, gateway: ServiceRequestGateway, queries: ServiceRequestQueries
    ):
        self.gateway = gateway
        self.queries = queries

    async def execute(
        self,
        request: ServiceRequest,
        scheduled_at: Optional[Union[datetime, str]],
    ) -> Optional[ServiceRequest]:
        """Schedule the request.

        Refuses to run without a date. The cached lists are invalidated only
        after the backend confirmed the update.
        """
        if scheduled_at is None or (
            isinstance(scheduled_at, str) and not scheduled_at.strip()
        ):
            raise RequiredFieldError("scheduled_date")

        if not request.can_transition_to(RequestStatus.IN_PROCESS):
            raise InvalidStatusTransitionError(
                request.id, request.status.value, RequestStatus.IN_PROCESS.value
            )

        scheduled_date = to_iso_timestamp(scheduled_at)
        updated = await self.gateway.update(
            request.id,
            status=RequestStatus.IN_PROCESS,
            scheduled_date=scheduled_date,
        )
        await self.queries.invalidate_after_update()

        logger.info(
            "Service request scheduled",
            request_id=request.id,
            scheduled_date=scheduled_date,
        )
        return updated
