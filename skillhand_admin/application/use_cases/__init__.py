"""
Application use cases.
"""

from .complete_service_request import CompleteServiceRequestUseCase
from .reject_service_request import RejectServiceRequestUseCase
from .review_employee_application import ReviewEmployeeApplicationUseCase
from .schedule_service_request import (
    ScheduleServiceRequestUseCase,
    to_iso_timestamp,
)

__all__ = [
    "CompleteServiceRequestUseCase",
    "RejectServiceRequestUseCase",
    "ReviewEmployeeApplicationUseCase",
    "ScheduleServiceRequestUseCase",
    "to_iso_timestamp",
]
