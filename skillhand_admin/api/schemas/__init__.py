"""
API schemas for the SkillHand admin console.
"""

from .auth import LoginRequest, UserResponse
from .common import BaseResponse, ErrorResponse, PageMeta
from .dashboard import DashboardResponse, DashboardStatsSchema
from .employee_application import (
    EmployeeApplicationActionResponse,
    EmployeeApplicationCard,
    EmployeeApplicationListResponse,
)
from .service_request import (
    ScheduleRequestBody,
    ServiceRequestActionResponse,
    ServiceRequestCard,
    ServiceRequestListResponse,
    ServiceRequestSummaryResponse,
)

__all__ = [
    "BaseResponse",
    "ErrorResponse",
    "PageMeta",
    "LoginRequest",
    "UserResponse",
    "DashboardResponse",
    "DashboardStatsSchema",
    "EmployeeApplicationActionResponse",
    "EmployeeApplicationCard",
    "EmployeeApplicationListResponse",
    "ScheduleRequestBody",
    "ServiceRequestActionResponse",
    "ServiceRequestCard",
    "ServiceRequestListResponse",
    "ServiceRequestSummaryResponse",
]
