"""
Backend record transformer.

The backend contract is not reconciled: records carry `_id` or `id`,
`customerName` or `name`, separate address parts or one location string.
Everything is mapped onto one canonical shape here so no other module has to
care about the variants.
"""

from typing import Any, Dict, List, Optional, Union

import structlog

from skillhand_admin.domain.entities.employee_application import EmployeeApplication
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.value_objects.address import Address
from skillhand_admin.domain.value_objects.application_status import (
    ApplicationStatus,
    ExperienceLevel,
)
from skillhand_admin.domain.value_objects.page import RequestSummary, StatusCounts
from skillhand_admin.domain.value_objects.priority import Priority
from skillhand_admin.domain.value_objects.request_status import RequestStatus

logger = structlog.get_logger()

Number = Union[int, float]

# Keys under which the backend may report per-status counts, in lookup order
COUNTS_KEYS = ("countsByStatus", "counts", "summary")

# Payload key -> StatusCounts field
COUNT_FIELDS = {
    "pending": "pending",
    "in-process": "in_process",
    "in-progress": "in_progress",
    "completed": "completed",
    "cancelled": "cancelled",
    "rejected": "rejected",
}


def coerce_number(value: Any) -> Optional[Number]:
    """Coerce a JSON scalar to a number, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        for parse in (int, float):
            try:
                return parse(text)
            except ValueError:
                continue
    return None


def coerce_int(value: Any) -> Optional[int]:
    number = coerce_number(value)
    return int(number) if number is not None else None


def first_text(raw: Dict[str, Any], *keys: str) -> Optional[str]:
    """Return the first non-empty value among keys, as a string."""
    for key in keys:
        value = raw.get(key)
        if value is None or isinstance(value, (dict, list)):
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def extract_list(payload: Any, *keys: str) -> Optional[List[Any]]:
    """Return payload itself when it is a list, else the first list under keys."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in keys:
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return None


class BackendRecordTransformer:
    """Transform backend payloads into canonical domain objects."""

    def transform_service_request(self, raw: Any) -> Optional[ServiceRequest]:
        """Transform one raw record; non-object entries yield None."""
        if not isinstance(raw, dict):
            return None

        primary_id = first_text(raw, "_id")
        fallback_id = first_text(raw, "id")
        canonical_id = primary_id or fallback_id or ""
        secondary_id = fallback_id if primary_id and fallback_id != primary_id else None

        address = self._transform_address(raw)
        location = first_text(raw, "customerLocation", "location") or address.full_address

        return ServiceRequest(
            id=canonical_id,
            secondary_id=secondary_id,
            customer_name=first_text(raw, "customerName", "name") or "",
            customer_phone=first_text(raw, "customerPhone", "phone"),
            customer_email=first_text(raw, "customerEmail", "email"),
            address=address,
            location=location,
            service_type=first_text(raw, "serviceType", "service", "category") or "",
            description=first_text(raw, "description") or "",
            estimated_cost=coerce_number(raw.get("estimatedCost")),
            status=self.transform_request_status(raw.get("status"), canonical_id),
            priority=self._transform_priority(raw.get("priority")),
            requested_date=first_text(
                raw, "requestedDate", "preferredDate", "createdAt"
            ),
            scheduled_date=first_text(raw, "scheduledDate"),
            completed_date=first_text(raw, "completedDate"),
        )

    def transform_service_requests(self, raw_items: List[Any]) -> List[ServiceRequest]:
        """Transform a list of raw records, dropping entries that are not objects."""
        requests = []
        for raw in raw_items:
            request = self.transform_service_request(raw)
            if request is not None:
                requests.append(request)
        return requests

    def transform_request_status(
        self, label: Any, record_id: str = ""
    ) -> RequestStatus:
        """Parse a status label; unknown labels degrade to pending."""
        if label is None:
            return RequestStatus.PENDING
        try:
            return RequestStatus.from_label(str(label))
        except ValueError:
            logger.warning(
                "Unknown service request status", status=label, request_id=record_id
            )
            return RequestStatus.PENDING

    def transform_employee_application(
        self, raw: Any
    ) -> Optional[EmployeeApplication]:
        """Transform one raw application; non-object entries yield None."""
        if not isinstance(raw, dict):
            return None

        application_id = first_text(raw, "_id", "id") or ""

        skills = raw.get("skills")
        if isinstance(skills, list):
            skills = [str(skill) for skill in skills if skill is not None]
        else:
            single_skill = first_text(raw, "skills", "skill")
            skills = [single_skill] if single_skill else []

        certifications = raw.get("certifications")
        if not isinstance(certifications, list):
            certifications = []

        return EmployeeApplication(
            id=application_id,
            name=first_text(raw, "name") or "",
            phone=first_text(raw, "phone"),
            email=first_text(raw, "email"),
            profile_image=first_text(raw, "profileImage"),
            skills=skills,
            experience_level=self._transform_experience(raw.get("experienceLevel")),
            rating=float(coerce_number(raw.get("rating")) or 0.0),
            previous_job_count=coerce_int(
                raw.get("previousJobCount", raw.get("previousJobs"))
            )
            or 0,
            certifications=[str(item) for item in certifications],
            expected_salary=coerce_number(raw.get("expectedSalary")),
            status=self._transform_application_status(
                raw.get("status"), application_id
            ),
            applied_date=first_text(raw, "appliedDate", "createdAt"),
            location=first_text(raw, "location") or "",
        )

    def transform_employee_applications(
        self, raw_items: List[Any]
    ) -> List[EmployeeApplication]:
        applications = []
        for raw in raw_items:
            application = self.transform_employee_application(raw)
            if application is not None:
                applications.append(application)
        return applications

    def transform_status_counts(self, payload: Any) -> Optional[StatusCounts]:
        """Extract per-status counts from the first counts object in payload.

        Only the fields present in the payload are set; the rest stay None.
        """
        if not isinstance(payload, dict):
            return None

        raw_counts = None
        for key in COUNTS_KEYS:
            if isinstance(payload.get(key), dict):
                raw_counts = payload[key]
                break
        if raw_counts is None:
            return None

        values = {}
        for payload_key, field_name in COUNT_FIELDS.items():
            if payload_key in raw_counts:
                values[field_name] = coerce_int(raw_counts[payload_key])
        return StatusCounts(**values)

    def transform_summary(self, payload: Any) -> Optional[RequestSummary]:
        """Transform the summary endpoint payload; non-objects yield None."""
        if not isinstance(payload, dict):
            return None
        return RequestSummary(
            total=coerce_int(payload.get("total")),
            counts=self.transform_status_counts(payload) or StatusCounts(),
        )

    def transform_update_request(
        self,
        status: Optional[RequestStatus] = None,
        scheduled_date: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build the partial-update body with only the changed fields."""
        body = {}
        if status is not None:
            body["status"] = RequestStatus(status).value
        if scheduled_date is not None:
            body["scheduledDate"] = scheduled_date
        return body

    def _transform_address(self, raw: Dict[str, Any]) -> Address:
        nested = raw.get("address")
        if isinstance(nested, dict):
            street = first_text(nested, "street")
            source = nested
        else:
            street = first_text(raw, "address", "street")
            source = raw
        return Address(
            street=street,
            city=first_text(source, "city"),
            state=first_text(source, "state"),
            zip_code=first_text(source, "zip", "zipCode", "zip_code"),
        )

    def _transform_priority(self, label: Any) -> Priority:
        try:
            return Priority(str(label).strip().lower())
        except ValueError:
            return Priority.LOW

    def _transform_experience(self, label: Any) -> ExperienceLevel:
        text = str(label).strip().capitalize() if label is not None else ""
        try:
            return ExperienceLevel(text)
        except ValueError:
            return ExperienceLevel.BEGINNER

    def _transform_application_status(
        self, label: Any, record_id: str = ""
    ) -> ApplicationStatus:
        if label is None:
            return ApplicationStatus.PENDING
        try:
            return ApplicationStatus(str(label).strip().lower())
        except ValueError:
            logger.warning(
                "Unknown application status", status=label, application_id=record_id
            )
            return ApplicationStatus.PENDING
