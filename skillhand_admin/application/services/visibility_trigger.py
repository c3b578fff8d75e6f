"""
Viewport visibility trigger for the infinite-scroll sentinel.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class SentinelGeometry:
    """Position of the sentinel element, in pixels relative to the viewport top."""

    top: float
    height: float
    viewport_height: float

    def visible_fraction(self, root_margin: float = 0.0) -> float:
        """Share of the sentinel inside the viewport grown by root_margin.

        A zero-height sentinel counts as fully visible when it sits inside the
        grown viewport, and invisible otherwise.
        """
        root_top = -root_margin
        root_bottom = self.viewport_height + root_margin
        bottom = self.top + self.height

        if self.height <= 0:
            return 1.0 if root_top <= self.top <= root_bottom else 0.0

        overlap = min(bottom, root_bottom) - max(self.top, root_top)
        if overlap <= 0:
            return 0.0
        return min(overlap / self.height, 1.0)


class VisibilityTrigger:
    """Call on_intersect when the sentinel scrolls into view.

    The callback fires at most once per transition into the intersecting
    state, and only while enabled. Disabling keeps observing; re-enabling
    while the sentinel is still visible fires once more.
    """

    def __init__(
        self,
        on_intersect: Callable[[], Any],
        threshold: float = 0.1,
        root_margin: float = 100.0,
        enabled: bool = True,
    ):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError("threshold must be between 0 and 1")
        self.on_intersect = on_intersect
        self.threshold = threshold
        self.root_margin = root_margin
        self._enabled = enabled
        self._intersecting = False
        self._armed = False
        self._firing = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_intersecting(self) -> bool:
        return self._intersecting

    def intersects(self, geometry: SentinelGeometry) -> bool:
        fraction = geometry.visible_fraction(self.root_margin)
        return fraction > 0 and fraction >= self.threshold

    async def observe(self, geometry: SentinelGeometry) -> bool:
        """Report the sentinel's current geometry; returns whether it intersects."""
        intersecting = self.intersects(geometry)

        if intersecting and not self._intersecting and self._enabled:
            self._armed = True
        elif not intersecting:
            self._armed = False

        self._intersecting = intersecting
        await self._fire_if_armed()
        return intersecting

    async def set_enabled(self, enabled: bool, rearm: bool = True) -> None:
        """Turn callbacks on or off.

        With rearm, enabling while the sentinel is visible fires the callback
        once; without it the sentinel has to leave and re-enter the viewport.
        """
        was_enabled = self._enabled
        self._enabled = enabled
        if not enabled:
            self._armed = False
        elif rearm and not was_enabled and self._intersecting:
            self._armed = True
            await self._fire_if_armed()

    def forget_geometry(self) -> None:
        """Treat the sentinel as outside the viewport until the next observation.

        Called after the layout around the sentinel changed, so the next
        visible observation counts as a fresh entry.
        """
        self._intersecting = False
        self._armed = False

    async def _fire_if_armed(self) -> None:
        # The callback is never re-entered from its own call chain
        if self._firing or not (self._armed and self._enabled):
            return
        self._armed = False
        self._firing = True
        logger.debug("Sentinel entered viewport")
        try:
            result = self.on_intersect()
            if inspect.isawaitable(result):
                await result
        finally:
            self._firing = False
