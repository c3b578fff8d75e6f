"""
Monitoring package.
"""

from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_backend_request,
    record_cache_event,
)

__all__ = [
    "get_metrics",
    "get_metrics_content_type",
    "record_backend_request",
    "record_cache_event",
]
