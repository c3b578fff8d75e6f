"""
Backend gateway interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from skillhand_admin.domain.entities.employee_application import EmployeeApplication
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.value_objects.application_status import ApplicationStatus
from skillhand_admin.domain.value_objects.page import Page, RequestSummary
from skillhand_admin.domain.value_objects.request_status import RequestStatus
from skillhand_admin.infrastructure.external.cancellation import CancelToken


class ServiceRequestGateway(ABC):
    """Read and update service requests held by the backend."""

    @abstractmethod
    async def list_all(
        self, cancel: Optional[CancelToken] = None
    ) -> List[ServiceRequest]:
        """Fetch every service request from the plain list endpoint."""
        pass

    @abstractmethod
    async def list_page(
        self, page: int, limit: int, cancel: Optional[CancelToken] = None
    ) -> Page:
        """Fetch one page of service requests."""
        pass

    @abstractmethod
    async def fetch_summary(
        self, cancel: Optional[CancelToken] = None
    ) -> Optional[RequestSummary]:
        """Fetch server-side counts, or None when unavailable."""
        pass

    @abstractmethod
    async def update(
        self,
        request_id: str,
        status: Optional[RequestStatus] = None,
        scheduled_date: Optional[str] = None,
    ) -> Optional[ServiceRequest]:
        """Change the status and/or scheduled date of one request."""
        pass


class EmployeeApplicationGateway(ABC):
    """Read and review employee applications held by the backend."""

    @abstractmethod
    async def list_all(
        self, cancel: Optional[CancelToken] = None
    ) -> List[EmployeeApplication]:
        """Fetch every employee application."""
        pass

    @abstractmethod
    async def update_status(
        self, application_id: str, status: ApplicationStatus
    ) -> Optional[EmployeeApplication]:
        """Record a review decision for one application."""
        pass
