"""
Service request API schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from skillhand_admin.application.services.dashboard_stats import RequestCounts
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.value_objects.request_status import RequestStatus

from .common import BaseResponse, PageMeta

STATUS_VARIANTS = {
    RequestStatus.PENDING: "warning",
    RequestStatus.IN_PROCESS: "info",
    RequestStatus.COMPLETED: "success",
    RequestStatus.CANCELLED: "destructive",
    RequestStatus.REJECTED: "destructive",
}

PRIORITY_VARIANTS = {
    "high": "destructive",
    "medium": "warning",
    "low": "secondary",
}


def available_actions(status: RequestStatus) -> List[str]:
    """Actions an admin may take on a request card."""
    if status == RequestStatus.PENDING:
        return ["accept", "reject", "view-details"]
    if status == RequestStatus.IN_PROCESS:
        return ["complete", "view-details"]
    return ["view-details"]


class AddressSchema(BaseModel):
    """Address schema."""

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class ServiceRequestCard(BaseModel):
    """One service request as rendered in the admin list."""

    id: str
    customer_name: str
    customer_phone: Optional[str] = None
    customer_email: Optional[str] = None
    address: AddressSchema
    location: str
    service_type: str
    description: str
    estimated_cost: Optional[float] = None
    status: str
    status_variant: str
    priority: str
    priority_variant: str
    requested_date: Optional[str] = None
    scheduled_date: Optional[str] = None
    completed_date: Optional[str] = None
    available_actions: List[str]

    @classmethod
    def from_entity(cls, request: ServiceRequest) -> "ServiceRequestCard":
        return cls(
            id=request.id,
            customer_name=request.customer_name,
            customer_phone=request.customer_phone,
            customer_email=request.customer_email,
            address=AddressSchema(**request.address.to_dict()),
            location=request.location,
            service_type=request.service_type,
            description=request.description,
            estimated_cost=request.estimated_cost,
            status=request.status.value,
            status_variant=STATUS_VARIANTS.get(request.status, "secondary"),
            priority=request.priority.value,
            priority_variant=PRIORITY_VARIANTS.get(request.priority.value, "secondary"),
            requested_date=request.requested_date,
            scheduled_date=request.scheduled_date,
            completed_date=request.completed_date,
            available_actions=available_actions(request.status),
        )


class ServiceRequestListResponse(BaseModel):
    """Filtered cards of one fetched page."""

    items: List[ServiceRequestCard]
    meta: PageMeta


class ScheduleRequestBody(BaseModel):
    """Body of the accept action."""

    scheduled_date: Optional[str] = Field(
        None, description="ISO-8601 date and time the job is scheduled for"
    )


class ServiceRequestActionResponse(BaseResponse):
    """Outcome of a status change."""

    data: Optional[ServiceRequestCard] = None


class SummaryTile(BaseModel):
    """One summary tile."""

    key: str
    label: str
    value: int


class ServiceRequestSummaryResponse(BaseModel):
    """Counts behind the summary tiles."""

    source: str
    total: int
    pending: int
    in_process: int
    completed: int
    cancelled: int
    rejected: int
    tiles: List[SummaryTile]

    @classmethod
    def from_counts(cls, counts: RequestCounts) -> "ServiceRequestSummaryResponse":
        return cls(
            source=counts.source,
            total=counts.total,
            pending=counts.pending,
            in_process=counts.in_process,
            completed=counts.completed,
            cancelled=counts.cancelled,
            rejected=counts.rejected,
            tiles=[
                SummaryTile(key="total", label="Total Requests", value=counts.total),
                SummaryTile(key="pending", label="Pending", value=counts.pending),
                SummaryTile(
                    key="in-process", label="In Process", value=counts.in_process
                ),
                SummaryTile(key="completed", label="Completed", value=counts.completed),
            ],
        )
