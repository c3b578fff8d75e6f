"""
Domain entities package.
"""

from .admin_user import AdminUser
from .employee_application import EmployeeApplication
from .service_request import ServiceRequest

__all__ = [
    "AdminUser",
    "EmployeeApplication",
    "ServiceRequest",
]
