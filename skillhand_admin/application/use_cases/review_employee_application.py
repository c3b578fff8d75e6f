"""Approve or reject employee applications."""

from typing import Optional

from skillhand_admin.application.interfaces.gateways import (
    EmployeeApplicationGateway,
)
from skillhand_admin.config.logging import get_logger
from skillhand_admin.domain.entities.employee_application import (
    EmployeeApplication,
)
from skillhand_admin.domain.exceptions.validation_error import (
    InvalidStatusTransitionError,
)
from skillhand_admin.domain.value_objects.application_status import (
    ApplicationStatus,
)

logger = get_logger(__name__)


class ReviewEmployeeApplicationUseCase:
    """Record the admin decision on a pending application.

    Decisions are final: approved or rejected applications cannot be
    reviewed again.
    """

    def __init__(self, gateway: EmployeeApplicationGateway):
        self.gateway = gateway

    async def approve(
        self, application: EmployeeApplication
    ) -> Optional[EmployeeApplication]:
        return await self._decide(application, ApplicationStatus.APPROVED)

    async def reject(
        self, application: EmployeeApplication
    ) -> Optional[EmployeeApplication]:
        return await self._decide(application, ApplicationStatus.REJECTED)

    async def _decide(
        self, application: EmployeeApplication, decision: ApplicationStatus
    ) -> Optional[EmployeeApplication]:
        if not application.can_transition_to(decision):
            raise InvalidStatusTransitionError(
                application.id, application.status.value, decision.value
            )

        updated = await self.gateway.update_status(application.id, decision)
        logger.info(
            "Employee application reviewed",
            application_id=application.id,
            decision=decision.value,
        )
        return updated
