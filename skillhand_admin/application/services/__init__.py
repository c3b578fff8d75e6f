"""
Application services package.
"""

from .auth_session import AuthSession
from .dashboard_stats import DashboardStats, DashboardStatsService, RequestCounts
from .infinite_scroll import InfiniteScrollFeed
from .pagination_cursor import CursorState, PaginationCursor
from .query_cache import QueryCache
from .record_filter import (
    filter_employee_applications,
    filter_records,
    filter_service_requests,
)
from .service_request_queries import ServiceRequestQueries
from .visibility_trigger import SentinelGeometry, VisibilityTrigger

__all__ = [
    "AuthSession",
    "CursorState",
    "DashboardStats",
    "DashboardStatsService",
    "InfiniteScrollFeed",
    "PaginationCursor",
    "QueryCache",
    "RequestCounts",
    "SentinelGeometry",
    "ServiceRequestQueries",
    "VisibilityTrigger",
    "filter_employee_applications",
    "filter_records",
    "filter_service_requests",
]
