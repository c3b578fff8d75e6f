"""
Domain exceptions package.
"""

from .api_error import (
    ApiClientError,
    HttpStatusError,
    InvalidResponseError,
    RequestCancelledError,
    TransportError,
)
from .validation_error import (
    InvalidFormatError,
    InvalidStatusTransitionError,
    RecordNotFoundError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
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
]
