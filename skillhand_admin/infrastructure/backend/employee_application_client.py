"""
Employee application resource client.
"""

from typing import List, Optional
from urllib.parse import quote

import structlog

from skillhand_admin.application.interfaces.gateways import EmployeeApplicationGateway
from skillhand_admin.domain.entities.employee_application import EmployeeApplication
from skillhand_admin.domain.value_objects.application_status import ApplicationStatus
from skillhand_admin.infrastructure.backend.transformer import (
    BackendRecordTransformer,
    extract_list,
)
from skillhand_admin.infrastructure.external.cancellation import CancelToken
from skillhand_admin.infrastructure.external.http_client import ApiTransport

logger = structlog.get_logger()

EMPLOYEE_APPLICATIONS_PATH = "/employee-applications"


class EmployeeApplicationClient(EmployeeApplicationGateway):
    """Employee application endpoints of the marketplace backend."""

    def __init__(
        self,
        transport: ApiTransport,
        transformer: Optional[BackendRecordTransformer] = None,
    ):
        self.transport = transport
        self.transformer = transformer or BackendRecordTransformer()

    async def list_all(
        self, cancel: Optional[CancelToken] = None
    ) -> List[EmployeeApplication]:
        payload = await self.transport.get(EMPLOYEE_APPLICATIONS_PATH, cancel=cancel)

        raw_items = extract_list(payload, "data", "results")
        if raw_items is None:
            logger.warning(
                "Unrecognized employee application list payload",
                payload_type=type(payload).__name__,
            )
            return []

        return self.transformer.transform_employee_applications(raw_items)

    async def update_status(
        self, application_id: str, status: ApplicationStatus
    ) -> Optional[EmployeeApplication]:
        if not application_id:
            raise ValueError("application_id is required")

        status = ApplicationStatus(status)
        payload = await self.transport.put(
            f"{EMPLOYEE_APPLICATIONS_PATH}/{quote(application_id, safe='')}",
            body={"status": status.value},
        )

        logger.info(
            "Employee application updated",
            application_id=application_id,
            status=status.value,
        )

        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            payload = payload["data"]
        return self.transformer.transform_employee_application(payload)
