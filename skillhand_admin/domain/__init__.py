"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "AdminUser",
    "EmployeeApplication",
    "ServiceRequest",
    # Exceptions
    "ApiClientError",
    "HttpStatusError",
    "InvalidResponseError",
    "RequestCancelledError",
    "TransportError",
    "ValidationError",
    "RequiredFieldError",
    "InvalidFormatError",
    "InvalidStatusTransitionError",
    "RecordNotFoundError",
    # Value Objects
    "Address",
    "ApplicationStatus",
    "ExperienceLevel",
    "Page",
    "Priority",
    "RequestStatus",
    "RequestSummary",
    "StatusCounts",
    "normalize_status",
]
