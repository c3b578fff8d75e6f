"""
Short-lived read-through cache for backend queries.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional, Tuple, TypeVar

import structlog

from skillhand_admin.domain.exceptions.api_error import RequestCancelledError
from skillhand_admin.infrastructure.external.cancellation import CancelToken
from skillhand_admin.infrastructure.monitoring.metrics import record_cache_event

logger = structlog.get_logger()

T = TypeVar("T")
QueryKey = Tuple[Hashable, ...]
Fetcher = Callable[[CancelToken], Awaitable[T]]


@dataclass
class CacheEntry:
    """Cached query result."""

    value: Any
    fetched_at: float


@dataclass
class SharedFetch:
    """A fetch in flight and the readers waiting on it."""

    task: asyncio.Future
    cancel: CancelToken
    waiters: int = 0


class QueryCache:
    """Query results keyed by tuples, invalidated by key prefix.

    Concurrent reads of the same key share one fetch. The shared fetch gets
    its own cancel token: a reader cancelling only stops its own wait, and
    the fetch is aborted once no reader is left. Entries are written only
    when a fetch succeeds, and a fetch that was running when its key was
    invalidated is not written back.
    """

    def __init__(
        self,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[QueryKey, CacheEntry] = {}
        self._in_flight: Dict[QueryKey, SharedFetch] = {}
        self._generations: Dict[QueryKey, int] = {}

    def peek(self, key: QueryKey) -> Optional[Any]:
        """Return the fresh cached value for key without fetching."""
        entry = self._entries.get(key)
        if entry is None or self._is_stale(entry):
            return None
        return entry.value

    async def fetch(
        self,
        key: QueryKey,
        fetcher: Fetcher,
        cancel: Optional[CancelToken] = None,
    ) -> T:
        """Return the cached value for key, fetching it when missing or stale.

        The fetcher is called with the shared fetch's token, never with the
        caller's. Cancelling `cancel` raises RequestCancelledError for this
        caller only.
        """
        entry = self._entries.get(key)
        if entry is not None and not self._is_stale(entry):
            record_cache_event("hit")
            return entry.value

        if cancel is not None and cancel.cancelled:
            raise RequestCancelledError()

        shared = self._in_flight.get(key)
        if shared is None:
            record_cache_event("miss")
            token = CancelToken()
            shared = SharedFetch(
                task=asyncio.ensure_future(
                    self._run(key, fetcher, token, self._generations.get(key, 0))
                ),
                cancel=token,
            )
            self._in_flight[key] = shared

        shared.waiters += 1
        try:
            return await self._wait(shared, cancel)
        finally:
            shared.waiters -= 1
            if shared.waiters == 0 and not shared.task.done():
                self._abandon(key, shared)

    def invalidate(self, prefix: QueryKey = ()) -> int:
        """Drop every entry whose key starts with prefix.

        Returns the number of keys invalidated.
        """
        keys = {
            key
            for key in list(self._entries) + list(self._in_flight)
            if key[: len(prefix)] == prefix
        }
        for key in keys:
            self._entries.pop(key, None)
            self._in_flight.pop(key, None)
            self._generations[key] = self._generations.get(key, 0) + 1

        if keys:
            record_cache_event("invalidated", len(keys))
            logger.debug("Query cache invalidated", prefix=prefix, keys=len(keys))
        return len(keys)

    def clear(self) -> None:
        self.invalidate(())

    def __contains__(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        return entry is not None and not self._is_stale(entry)

    def __len__(self) -> int:
        return len(self._entries)

    async def _wait(self, shared: SharedFetch, cancel: Optional[CancelToken]) -> T:
        if cancel is None:
            # Shielded so one caller giving up does not abort the shared fetch
            return await asyncio.shield(shared.task)

        cancelled = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait(
                {shared.task, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            cancelled.cancel()

        if shared.task in done:
            return shared.task.result()
        raise RequestCancelledError()

    def _abandon(self, key: QueryKey, shared: SharedFetch) -> None:
        if self._in_flight.get(key) is shared:
            self._in_flight.pop(key, None)
        shared.cancel.cancel()
        # Nobody awaits the aborted fetch any more
        shared.task.add_done_callback(_discard_result)
        logger.debug("Query fetch abandoned by every reader", key=key)

    async def _run(
        self,
        key: QueryKey,
        fetcher: Fetcher,
        cancel: CancelToken,
        generation: int,
    ) -> T:
        try:
            value = await fetcher(cancel)
        finally:
            shared = self._in_flight.get(key)
            if shared is not None and shared.task is asyncio.current_task():
                self._in_flight.pop(key, None)

        if self._generations.get(key, 0) == generation:
            self._entries[key] = CacheEntry(value=value, fetched_at=self._clock())
        return value

    def _is_stale(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.fetched_at > self.ttl_seconds


def _discard_result(task: asyncio.Future) -> None:
    if not task.cancelled():
        task.exception()
