"""
External integrations package.
"""

from .cancellation import CancelToken
from .http_client import ApiTransport, extract_error_message

__all__ = [
    "ApiTransport",
    "CancelToken",
    "extract_error_message",
]
