"""
Unit tests for PaginationCursor.
"""

import asyncio

import pytest

from skillhand_admin.application.services.pagination_cursor import (
    CursorState,
    PaginationCursor,
)
from skillhand_admin.domain.exceptions.api_error import (
    HttpStatusError,
    RequestCancelledError,
)
from skillhand_admin.domain.value_objects.page import Page


class FakePager:
    """Serves `total` integers in pages, recording every request."""

    def __init__(self, total: int):
        self.total = total
        self.calls = []
        self.gate = None

    async def __call__(self, page, limit, cancel):
        self.calls.append((page, limit))
        if self.gate is not None:
            await self.gate.wait()
        if cancel is not None and cancel.cancelled:
            raise RequestCancelledError()
        start = (page - 1) * limit
        items = list(range(start, min(start + limit, self.total)))
        return Page(
            items=items,
            has_more=start + limit < self.total,
            total=self.total,
            page=page,
            limit=limit,
        )


class TestPaginationCursor:
    @pytest.mark.asyncio
    async def test_pages_accumulate_in_order(self):
        pager = FakePager(25)
        cursor = PaginationCursor(pager, limit=10)

        await cursor.start()
        await cursor.advance()
        await cursor.advance()

        assert cursor.items == list(range(25))
        assert pager.calls == [(1, 10), (2, 10), (3, 10)]
        assert cursor.state == CursorState.EXHAUSTED
        assert cursor.total == 25

    @pytest.mark.asyncio
    async def test_exhausted_cursor_does_not_fetch(self):
        pager = FakePager(5)
        cursor = PaginationCursor(pager, limit=10)

        await cursor.start()
        assert cursor.has_more is False
        assert await cursor.advance() is None
        assert pager.calls == [(1, 10)]

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self):
        pager = FakePager(25)
        cursor = PaginationCursor(pager, limit=10)

        first = await cursor.start()
        again = await cursor.start()

        assert first is again
        assert pager.calls == [(1, 10)]

    @pytest.mark.asyncio
    async def test_double_advance_issues_one_request(self):
        pager = FakePager(25)
        pager.gate = asyncio.Event()
        cursor = PaginationCursor(pager, limit=10)

        first = asyncio.ensure_future(cursor.advance())
        await asyncio.sleep(0)
        assert cursor.is_fetching
        assert await cursor.advance() is None

        pager.gate.set()
        page = await first

        assert page.page == 1
        assert pager.calls == [(1, 10)]
        assert cursor.state == CursorState.IDLE

    @pytest.mark.asyncio
    async def test_error_keeps_pages_and_allows_retry(self):
        pager = FakePager(25)
        cursor = PaginationCursor(pager, limit=10)
        await cursor.start()

        async def failing(page, limit, cancel):
            raise HttpStatusError(500, "Internal error")

        cursor.fetch_page = failing
        with pytest.raises(HttpStatusError):
            await cursor.advance()

        assert cursor.items == list(range(10))
        assert cursor.state == CursorState.IDLE
        assert isinstance(cursor.last_error, HttpStatusError)

        cursor.fetch_page = pager
        page = await cursor.advance()
        assert page.page == 2
        assert cursor.last_error is None

    @pytest.mark.asyncio
    async def test_close_aborts_in_flight_fetch(self):
        pager = FakePager(25)
        pager.gate = asyncio.Event()
        cursor = PaginationCursor(pager, limit=10)

        pending = asyncio.ensure_future(cursor.advance())
        await asyncio.sleep(0)
        cursor.close()
        pager.gate.set()

        assert await pending is None
        assert cursor.pages == []
        assert cursor.state == CursorState.IDLE

    @pytest.mark.asyncio
    async def test_refresh_refetches_held_pages(self):
        pager = FakePager(25)
        cursor = PaginationCursor(pager, limit=10)
        await cursor.start()
        await cursor.advance()
        pager.calls.clear()

        pager.total = 12
        pages = await cursor.refresh()

        assert pager.calls == [(1, 10), (2, 10)]
        assert [page.page for page in pages] == [1, 2]
        assert cursor.items == list(range(12))
        assert cursor.state == CursorState.EXHAUSTED

    @pytest.mark.asyncio
    async def test_refresh_stops_when_nothing_follows(self):
        pager = FakePager(25)
        cursor = PaginationCursor(pager, limit=10)
        await cursor.start()
        await cursor.advance()
        pager.calls.clear()

        pager.total = 4
        await cursor.refresh()

        assert pager.calls == [(1, 10)]
        assert cursor.items == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_refresh_supersedes_in_flight_advance(self):
        pager = FakePager(25)
        cursor = PaginationCursor(pager, limit=10)
        await cursor.start()

        pager.gate = asyncio.Event()
        stale = asyncio.ensure_future(cursor.advance())
        await asyncio.sleep(0)
        refreshing = asyncio.ensure_future(cursor.refresh())
        await asyncio.sleep(0)
        pager.gate.set()

        assert await stale is None
        await refreshing
        assert [page.page for page in cursor.pages] == [1]
        assert cursor.state == CursorState.IDLE

    def test_limit_must_be_positive(self):
        with pytest.raises(ValueError):
            PaginationCursor(FakePager(1), limit=0)
