"""
Cached service request queries shared by the views.
"""

import weakref
from typing import List, Optional

import structlog

from skillhand_admin.application.interfaces.gateways import ServiceRequestGateway
from skillhand_admin.application.services.dashboard_stats import (
    RequestCounts,
    summary_is_complete,
)
from skillhand_admin.application.services.infinite_scroll import InfiniteScrollFeed
from skillhand_admin.application.services.pagination_cursor import PaginationCursor
from skillhand_admin.application.services.query_cache import QueryCache
from skillhand_admin.config.settings import settings
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.exceptions.api_error import ApiClientError
from skillhand_admin.domain.value_objects.page import Page, RequestSummary
from skillhand_admin.infrastructure.external.cancellation import CancelToken

logger = structlog.get_logger()

ALL_REQUESTS_KEY = ("service-requests",)
PAGES_KEY = ("service-requests-infinite",)
SUMMARY_KEY = ("service-requests-summary",)


class ServiceRequestQueries:
    """Read-through access to service requests.

    Owns the query cache. Filters are applied client-side on fetched pages,
    so they are not part of any cache key.
    """

    def __init__(
        self,
        gateway: ServiceRequestGateway,
        cache: Optional[QueryCache] = None,
        page_size: int = 10,
    ):
        self.gateway = gateway
        self.cache = cache or QueryCache()
        self.page_size = page_size
        self._cursors: "weakref.WeakSet[PaginationCursor]" = weakref.WeakSet()

    async def all_requests(
        self, cancel: Optional[CancelToken] = None
    ) -> List[ServiceRequest]:
        return await self.cache.fetch(
            ALL_REQUESTS_KEY,
            lambda token: self.gateway.list_all(cancel=token),
            cancel=cancel,
        )

    async def page(
        self,
        page: int,
        limit: Optional[int] = None,
        cancel: Optional[CancelToken] = None,
    ) -> Page:
        limit = limit or self.page_size
        return await self.cache.fetch(
            PAGES_KEY + (limit, page),
            lambda token: self.gateway.list_page(page, limit, cancel=token),
            cancel=cancel,
        )

    async def summary(
        self, cancel: Optional[CancelToken] = None
    ) -> Optional[RequestSummary]:
        return await self.cache.fetch(
            SUMMARY_KEY,
            lambda token: self.gateway.fetch_summary(cancel=token),
            cancel=cancel,
        )

    def cursor(self, limit: Optional[int] = None) -> PaginationCursor:
        """Create an infinite-scroll cursor refreshed on every invalidation."""
        limit = limit or self.page_size

        async def fetch_page(
            page: int, page_limit: int, cancel: Optional[CancelToken]
        ) -> Page:
            return await self.page(page, page_limit, cancel=cancel)

        cursor = PaginationCursor(fetch_page, limit=limit)
        self._cursors.add(cursor)
        return cursor

    def feed(
        self,
        limit: Optional[int] = None,
        threshold: Optional[float] = None,
        root_margin: Optional[float] = None,
    ) -> InfiniteScrollFeed:
        return InfiniteScrollFeed(
            self.cursor(limit),
            threshold=settings.SCROLL_THRESHOLD if threshold is None else threshold,
            root_margin=(
                settings.SCROLL_ROOT_MARGIN_PX if root_margin is None else root_margin
            ),
        )

    async def status_counts(
        self, cancel: Optional[CancelToken] = None
    ) -> RequestCounts:
        """Counts for the summary tiles.

        The server summary is preferred; counts it does not report are
        computed from the full list.
        """
        summary = await self.summary(cancel=cancel)
        if summary is not None and summary_is_complete(summary):
            return RequestCounts.from_summary(summary)

        computed = RequestCounts.from_requests(await self.all_requests(cancel=cancel))
        if summary is None or (summary.total is None and summary.counts.is_empty()):
            return computed
        return RequestCounts.from_summary(summary, fallback=computed)

    async def find(
        self, request_id: str, cancel: Optional[CancelToken] = None
    ) -> Optional[ServiceRequest]:
        """Look a request up by either of its identifiers."""
        for cursor in list(self._cursors):
            for request in cursor.items:
                if request.has_identifier(request_id):
                    return request

        for request in await self.all_requests(cancel=cancel):
            if request.has_identifier(request_id):
                return request
        return None

    async def invalidate_after_update(self) -> None:
        """Drop everything a status change can affect and refetch live lists.

        The update has already been applied by then, so a failed refetch is
        logged and left on the cursor (`last_error`) instead of raised.
        """
        invalidated = 0
        for key in (PAGES_KEY, SUMMARY_KEY, ALL_REQUESTS_KEY):
            invalidated += self.cache.invalidate(key)

        cursors = [cursor for cursor in list(self._cursors) if cursor.pages]
        logger.info(
            "Service request queries invalidated",
            keys=invalidated,
            cursors=len(cursors),
        )

        for cursor in cursors:
            try:
                await cursor.refresh()
            except ApiClientError as e:
                logger.warning("Cursor refetch after update failed", error=str(e))
