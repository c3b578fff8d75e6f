"""
Infinite-scroll feed: a pagination cursor driven by a visibility trigger.
"""

from typing import Generic, List, Optional, TypeVar

from skillhand_admin.application.services.pagination_cursor import PaginationCursor
from skillhand_admin.application.services.visibility_trigger import (
    SentinelGeometry,
    VisibilityTrigger,
)
from skillhand_admin.domain.value_objects.page import Page

T = TypeVar("T")


class InfiniteScrollFeed(Generic[T]):
    """Load the next page whenever the sentinel after the last item shows up.

    Each scroll event loads at most one page. The trigger is disabled while a
    page is loading and once the cursor is exhausted.
    """

    def __init__(
        self,
        cursor: PaginationCursor,
        threshold: float = 0.1,
        root_margin: float = 100.0,
    ):
        self.cursor = cursor
        self.trigger = VisibilityTrigger(
            self._load_more,
            threshold=threshold,
            root_margin=root_margin,
            enabled=False,
        )
        self._closed = False

    @property
    def items(self) -> List[T]:
        return self.cursor.items

    @property
    def has_more(self) -> bool:
        return self.cursor.has_more

    async def start(self) -> Optional[Page]:
        """Load page 1 and start listening to the sentinel."""
        page = await self.cursor.start()
        await self.trigger.set_enabled(self._can_load)
        return page

    async def on_scroll(self, geometry: SentinelGeometry) -> bool:
        """Forward a sentinel geometry update; returns whether it is visible."""
        return await self.trigger.observe(geometry)

    async def refresh(self) -> None:
        await self.trigger.set_enabled(False)
        try:
            await self.cursor.refresh()
        finally:
            await self.trigger.set_enabled(self._can_load, rearm=False)

    async def close(self) -> None:
        """Stop loading and abort the page request in flight."""
        self._closed = True
        await self.trigger.set_enabled(False)
        self.cursor.close()

    async def _load_more(self) -> None:
        await self.trigger.set_enabled(False)
        try:
            page = await self.cursor.advance()
        except Exception:
            # Wait for the sentinel to re-enter before trying again
            await self.trigger.set_enabled(self._can_load, rearm=False)
            raise
        if page is not None:
            # New items pushed the sentinel down; its old geometry is stale
            self.trigger.forget_geometry()
        await self.trigger.set_enabled(self._can_load, rearm=False)

    @property
    def _can_load(self) -> bool:
        return not self._closed and self.cursor.can_advance
