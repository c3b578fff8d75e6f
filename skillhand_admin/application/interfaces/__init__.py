"""
Application interfaces package.
"""

from .auth import CurrentUserProvider
from .gateways import EmployeeApplicationGateway, ServiceRequestGateway

__all__ = [
    "CurrentUserProvider",
    "EmployeeApplicationGateway",
    "ServiceRequestGateway",
]
