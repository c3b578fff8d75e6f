"""Service request domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from skillhand_admin.domain.value_objects.address import Address
from skillhand_admin.domain.value_objects.priority import Priority
from skillhand_admin.domain.value_objects.request_status import RequestStatus


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 date or timestamp sent by the backend."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


@dataclass
class ServiceRequest:
    """Customer-submitted work order in its canonical shape."""

    id: str
    customer_name: str = ""
    customer_phone: Optional[str] = None
    customer_email: Optional[str] = None
    address: Address = field(default_factory=Address)
    location: str = ""
    service_type: str = ""
    description: str = ""
    estimated_cost: Optional[float] = None
    status: RequestStatus = RequestStatus.PENDING
    priority: Priority = Priority.LOW
    requested_date: Optional[str] = None
    scheduled_date: Optional[str] = None
    completed_date: Optional[str] = None

    # The other identifier form when the backend sent both `_id` and `id`
    secondary_id: Optional[str] = None

    @property
    def street(self) -> Optional[str]:
        return self.address.street

    @property
    def city(self) -> Optional[str]:
        return self.address.city

    @property
    def state(self) -> Optional[str]:
        return self.address.state

    @property
    def zip_code(self) -> Optional[str]:
        return self.address.zip_code

    def has_identifier(self, request_id: str) -> bool:
        """Check if request_id names this record under either id form."""
        return bool(request_id) and request_id in (self.id, self.secondary_id)

    def can_transition_to(self, target: RequestStatus) -> bool:
        """Check if the lifecycle allows moving this request to target."""
        return self.status.can_transition_to(target)

    def is_urgent(self) -> bool:
        """High priority requests that are still open."""
        return self.priority.is_urgent() and self.status.is_open()

    def completed_on(self) -> Optional[date]:
        completed_at = parse_timestamp(self.completed_date)
        return completed_at.date() if completed_at else None
