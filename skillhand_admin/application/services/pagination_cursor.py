"""
Sequential page cursor for infinite-scroll lists.
"""

from enum import Enum
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

import structlog

from skillhand_admin.domain.exceptions.api_error import RequestCancelledError
from skillhand_admin.domain.value_objects.page import Page
from skillhand_admin.infrastructure.external.cancellation import CancelToken

logger = structlog.get_logger()

T = TypeVar("T")

PageFetcher = Callable[[int, int, Optional[CancelToken]], Awaitable[Page]]


class CursorState(str, Enum):
    """Pagination cursor state enumeration."""

    IDLE = "idle"
    FETCHING_NEXT = "fetching-next"
    EXHAUSTED = "exhausted"


class PaginationCursor(Generic[T]):
    """Advancing pointer over the pages of one list query.

    Pages are kept in fetch order and `items` is their concatenation. Only
    one page request is ever outstanding: page N+1 is requested after page
    N's response has been stored.
    """

    def __init__(self, fetch_page: PageFetcher, limit: int = 10):
        if limit < 1:
            raise ValueError("limit must be positive")
        self.fetch_page = fetch_page
        self.limit = limit
        self.pages: List[Page] = []
        self.state = CursorState.IDLE
        self.last_error: Optional[Exception] = None
        self._cancel: Optional[CancelToken] = None
        self._epoch = 0

    @property
    def has_more(self) -> bool:
        """Whether a next page is known to exist."""
        if not self.pages:
            return True
        return self.pages[-1].has_more

    @property
    def is_fetching(self) -> bool:
        return self.state == CursorState.FETCHING_NEXT

    @property
    def can_advance(self) -> bool:
        return self.state == CursorState.IDLE and self.has_more

    @property
    def next_page(self) -> int:
        return self.pages[-1].page + 1 if self.pages else 1

    @property
    def items(self) -> List[T]:
        """All fetched items, page after page, without de-duplication."""
        return [item for page in self.pages for item in page.items]

    @property
    def total(self) -> Optional[int]:
        return self.pages[-1].total if self.pages else None

    async def start(self) -> Optional[Page]:
        """Fetch page 1 unless the cursor already holds pages."""
        if self.pages:
            return self.pages[0]
        return await self.advance()

    async def advance(self) -> Optional[Page]:
        """Fetch the next page.

        Returns None without requesting anything while a fetch is in flight or
        when no further page exists, and when the fetch is cancelled.
        """
        if not self.can_advance:
            logger.debug(
                "Cursor advance ignored", state=self.state.value, has_more=self.has_more
            )
            return None

        page_number = self.next_page
        epoch = self._epoch
        token = CancelToken()
        self.state = CursorState.FETCHING_NEXT
        self._cancel = token

        try:
            page = await self.fetch_page(page_number, self.limit, token)
        except RequestCancelledError:
            if epoch == self._epoch:
                self.state = CursorState.IDLE
            logger.debug("Cursor fetch cancelled", page=page_number)
            return None
        except Exception as e:
            if epoch == self._epoch:
                self.state = CursorState.IDLE
                self.last_error = e
            logger.error("Cursor fetch failed", page=page_number, error=str(e))
            raise
        finally:
            if self._cancel is token:
                self._cancel = None

        if epoch != self._epoch:
            # A refresh replaced the pages while this one was loading
            return None

        self.pages.append(page)
        self.last_error = None
        self.state = CursorState.IDLE if page.has_more else CursorState.EXHAUSTED

        logger.debug(
            "Cursor advanced",
            page=page.page,
            items=len(page.items),
            has_more=page.has_more,
        )
        return page

    async def refresh(self) -> List[Page]:
        """Refetch the pages held so far, in order, replacing them.

        Used after the underlying data changed. An in-flight advance is
        aborted first. Stops early when a refetched page reports that nothing
        follows it.
        """
        self.close()
        self._epoch += 1
        epoch = self._epoch
        token = CancelToken()
        page_count = max(len(self.pages), 1)
        refreshed: List[Page] = []
        self.state = CursorState.FETCHING_NEXT
        self._cancel = token

        try:
            for page_number in range(1, page_count + 1):
                page = await self.fetch_page(page_number, self.limit, token)
                refreshed.append(page)
                if not page.has_more:
                    break
        except RequestCancelledError:
            if epoch == self._epoch:
                self.state = self._settled_state()
            logger.debug("Cursor refresh cancelled")
            return self.pages
        except Exception as e:
            if epoch == self._epoch:
                self.state = self._settled_state()
                self.last_error = e
            logger.error("Cursor refresh failed", error=str(e))
            raise
        finally:
            if self._cancel is token:
                self._cancel = None

        if epoch != self._epoch:
            return self.pages

        self.pages = refreshed
        self.last_error = None
        self.state = self._settled_state()
        logger.debug("Cursor refreshed", pages=len(refreshed))
        return self.pages

    def close(self) -> None:
        """Abort the in-flight request, if any."""
        if self._cancel is not None:
            self._cancel.cancel()

    def _settled_state(self) -> CursorState:
        return CursorState.IDLE if self.has_more else CursorState.EXHAUSTED
