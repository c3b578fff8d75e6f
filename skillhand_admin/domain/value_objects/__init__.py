"""
Domain value objects package.
"""

from .address import Address
from .application_status import ApplicationStatus, ExperienceLevel
from .page import Page, RequestSummary, StatusCounts
from .priority import Priority
from .request_status import RequestStatus, normalize_status

__all__ = [
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
