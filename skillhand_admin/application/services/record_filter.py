"""
Client-side search and filtering over fetched records.
"""

from typing import Any, Iterable, List, Optional, Sequence, TypeVar

from skillhand_admin.domain.entities.employee_application import EmployeeApplication
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.value_objects.request_status import normalize_status

T = TypeVar("T")

ALL = "all"

SERVICE_REQUEST_SEARCH_FIELDS = (
    "customer_name",
    "service_type",
    "location",
    "street",
    "city",
    "state",
    "zip_code",
    "id",
    "secondary_id",
)

EMPLOYEE_APPLICATION_SEARCH_FIELDS = ("name", "skills", "location", "id")


def _label(value: Any) -> Optional[str]:
    """Plain string form of enum members and strings."""
    if value is None:
        return None
    return getattr(value, "value", value)


def matches_query(item: Any, query: str, search_fields: Sequence[str]) -> bool:
    """Case-insensitive substring match on any of search_fields.

    List-valued fields match when any of their string entries matches.
    An empty or whitespace-only query matches everything.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return True

    for field_name in search_fields:
        value = getattr(item, field_name, None)
        candidates = value if isinstance(value, (list, tuple)) else [value]
        for candidate in candidates:
            if isinstance(candidate, str) and needle in candidate.lower():
                return True
    return False


def matches_status(item: Any, status_filter: Optional[str]) -> bool:
    if not status_filter or status_filter == ALL:
        return True
    return normalize_status(_label(getattr(item, "status", None))) == normalize_status(
        status_filter
    )


def matches_category(
    item: Any, category_filter: Optional[str], category_field: Optional[str]
) -> bool:
    if not category_filter or category_filter == ALL or category_field is None:
        return True
    return _label(getattr(item, category_field, None)) == category_filter


def filter_records(
    items: Iterable[T],
    query: str = "",
    status_filter: str = ALL,
    category_filter: str = ALL,
    search_fields: Sequence[str] = SERVICE_REQUEST_SEARCH_FIELDS,
    category_field: Optional[str] = "priority",
) -> List[T]:
    """Return the items matching query AND status AND category, in input order."""
    return [
        item
        for item in items
        if matches_query(item, query, search_fields)
        and matches_status(item, status_filter)
        and matches_category(item, category_filter, category_field)
    ]


def filter_service_requests(
    items: Iterable[ServiceRequest],
    query: str = "",
    status_filter: str = ALL,
    priority_filter: str = ALL,
) -> List[ServiceRequest]:
    return filter_records(
        items,
        query,
        status_filter,
        priority_filter,
        search_fields=SERVICE_REQUEST_SEARCH_FIELDS,
        category_field="priority",
    )


def filter_employee_applications(
    items: Iterable[EmployeeApplication],
    query: str = "",
    status_filter: str = ALL,
    experience_filter: str = ALL,
) -> List[EmployeeApplication]:
    return filter_records(
        items,
        query,
        status_filter,
        experience_filter,
        search_fields=EMPLOYEE_APPLICATION_SEARCH_FIELDS,
        category_field="experience_level",
    )
