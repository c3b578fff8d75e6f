"""
Cooperative cancellation for backend requests.
"""

import asyncio


class CancelToken:
    """One-shot signal that aborts the requests it was handed to.

    A query creates a token per fetch and cancels it when the caller navigates
    away or re-triggers the query.
    """

    def __init__(self):
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        """Block until the token is cancelled."""
        await self._event.wait()
