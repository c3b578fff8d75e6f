"""
Pagination and summary value objects.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StatusCounts:
    """Per-status counts reported by the backend.

    A field the payload did not carry stays None, so "zero" and "unknown"
    remain distinguishable.
    """

    pending: Optional[int] = None
    in_process: Optional[int] = None
    in_progress: Optional[int] = None
    completed: Optional[int] = None
    cancelled: Optional[int] = None
    rejected: Optional[int] = None

    @property
    def active(self) -> Optional[int]:
        """In-process count including the legacy 'in-progress' bucket."""
        if self.in_process is None and self.in_progress is None:
            return None
        return (self.in_process or 0) + (self.in_progress or 0)

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in [
                self.pending,
                self.in_process,
                self.in_progress,
                self.completed,
                self.cancelled,
                self.rejected,
            ]
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    """One fetched batch of list items plus pagination metadata."""

    items: List[T] = field(default_factory=list)
    has_more: bool = False
    total: Optional[int] = None
    page: int = 1
    limit: int = 10
    counts: Optional[StatusCounts] = None

    @classmethod
    def empty(cls, page: int, limit: int) -> "Page":
        return cls(items=[], has_more=False, total=None, page=page, limit=limit)


@dataclass(frozen=True)
class RequestSummary:
    """Server-computed aggregate counts for service requests."""

    total: Optional[int] = None
    counts: StatusCounts = field(default_factory=StatusCounts)
