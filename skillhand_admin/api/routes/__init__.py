"""
API routes package.
"""

from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .employee_applications import router as employee_applications_router
from .health import router as health_router
from .service_requests import router as service_requests_router

__all__ = [
    "auth_router",
    "dashboard_router",
    "employee_applications_router",
    "health_router",
    "service_requests_router",
]
