"""
Summary counts and dashboard statistics.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from skillhand_admin.domain.entities.employee_application import EmployeeApplication
from skillhand_admin.domain.entities.service_request import (
    ServiceRequest,
    parse_timestamp,
)
from skillhand_admin.domain.value_objects.application_status import ApplicationStatus
from skillhand_admin.domain.value_objects.page import RequestSummary
from skillhand_admin.domain.value_objects.request_status import RequestStatus

SERVER = "server"
COMPUTED = "computed"


@dataclass(frozen=True)
class RequestCounts:
    """Counts behind the service request summary tiles."""

    total: int
    pending: int
    in_process: int
    completed: int
    cancelled: int
    rejected: int
    source: str = COMPUTED

    @classmethod
    def from_requests(cls, requests: Iterable[ServiceRequest]) -> "RequestCounts":
        requests = list(requests)

        def count(status: RequestStatus) -> int:
            return sum(1 for request in requests if request.status == status)

        return cls(
            total=len(requests),
            pending=count(RequestStatus.PENDING),
            in_process=count(RequestStatus.IN_PROCESS),
            completed=count(RequestStatus.COMPLETED),
            cancelled=count(RequestStatus.CANCELLED),
            rejected=count(RequestStatus.REJECTED),
            source=COMPUTED,
        )

    @classmethod
    def from_summary(
        cls, summary: RequestSummary, fallback: Optional["RequestCounts"] = None
    ) -> "RequestCounts":
        """Build counts from the server summary.

        Values the summary does not report are taken from fallback, or 0
        without one.
        """
        counts = summary.counts

        def pick(value: Optional[int], field_name: str) -> int:
            if value is not None:
                return value
            return getattr(fallback, field_name) if fallback is not None else 0

        return cls(
            total=pick(summary.total, "total"),
            pending=pick(counts.pending, "pending"),
            in_process=pick(counts.active, "in_process"),
            completed=pick(counts.completed, "completed"),
            cancelled=pick(counts.cancelled, "cancelled"),
            rejected=pick(counts.rejected, "rejected"),
            source=SERVER,
        )


def summary_is_complete(summary: RequestSummary) -> bool:
    """Whether the summary reports every value shown on the tiles."""
    counts = summary.counts
    return None not in (
        summary.total,
        counts.pending,
        counts.active,
        counts.completed,
        counts.cancelled,
        counts.rejected,
    )


@dataclass(frozen=True)
class DashboardStats:
    """Headline numbers of the admin dashboard."""

    total_service_requests: int
    active_employees: int
    completed_today: int
    pending_requests: int
    employee_applications: int
    urgent_requests: int


class DashboardStatsService:
    """Compute dashboard statistics from fetched records."""

    RECENT_REQUESTS = 4
    RECENT_APPLICATIONS = 3

    def compute(
        self,
        requests: Sequence[ServiceRequest],
        applications: Sequence[EmployeeApplication],
        today: Optional[date] = None,
        request_counts: Optional[RequestCounts] = None,
    ) -> DashboardStats:
        """Compute headline numbers.

        request_counts, when given (typically from the server summary), wins
        over counting the fetched requests.
        """
        today = today or date.today()
        counts = request_counts or RequestCounts.from_requests(requests)

        return DashboardStats(
            total_service_requests=counts.total,
            active_employees=sum(
                1 for app in applications if app.status == ApplicationStatus.APPROVED
            ),
            completed_today=sum(
                1
                for request in requests
                if request.status == RequestStatus.COMPLETED
                and request.completed_on() == today
            ),
            pending_requests=counts.pending,
            employee_applications=sum(
                1 for app in applications if app.status == ApplicationStatus.PENDING
            ),
            urgent_requests=sum(1 for request in requests if request.is_urgent()),
        )

    def recent_requests(
        self, requests: Sequence[ServiceRequest], limit: int = RECENT_REQUESTS
    ) -> List[ServiceRequest]:
        """Newest requests first, by requested date; undated ones last."""
        return _newest_first(requests, lambda r: r.requested_date)[:limit]

    def recent_applications(
        self,
        applications: Sequence[EmployeeApplication],
        limit: int = RECENT_APPLICATIONS,
    ) -> List[EmployeeApplication]:
        return _newest_first(applications, lambda a: a.applied_date)[:limit]


def _newest_first(records, date_of) -> list:
    dated = []
    undated = []
    for record in records:
        timestamp = parse_timestamp(date_of(record))
        if timestamp is None:
            undated.append(record)
        else:
            dated.append((timestamp.replace(tzinfo=None), record))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [record for _, record in dated] + undated
