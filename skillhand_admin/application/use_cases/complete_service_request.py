"""Close out a service request that is being worked on."""

from typing import Optional

from skillhand_admin.application.interfaces.gateways import ServiceRequestGateway
from skillhand_admin.application.services.service_request_queries import (
    ServiceRequestQueries,
)
from skillhand_admin.config.logging import get_logger
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.exceptions.validation_error import (
    InvalidStatusTransitionError,
)
from skillhand_admin.domain.value_objects.request_status import RequestStatus

logger = get_logger(__name__)


class CompleteServiceRequestUseCase:
    """Move an in-process request to completed."""

    def __init__(
        self, gateway: ServiceRequestGateway, queries: ServiceRequestQueries
    ):
        self.gateway = gateway
        self.queries = queries

    async def execute(self, request: ServiceRequest) -> Optional[ServiceRequest]:
        if not request.can_transition_to(RequestStatus.COMPLETED):
            raise InvalidStatusTransitionError(
                request.id, request.status.value, RequestStatus.COMPLETED.value
            )

        updated = await self.gateway.update(
            request.id, status=RequestStatus.COMPLETED
        )
        await self.queries.invalidate_after_update()

        logger.info("Service request completed", request_id=request.id)
        return updated
