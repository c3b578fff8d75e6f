"""
Marketplace backend clients package.
"""

from .employee_application_client import EmployeeApplicationClient
from .service_request_client import ServiceRequestClient, derive_has_more
from .transformer import BackendRecordTransformer

__all__ = [
    "BackendRecordTransformer",
    "EmployeeApplicationClient",
    "ServiceRequestClient",
    "derive_has_more",
]
