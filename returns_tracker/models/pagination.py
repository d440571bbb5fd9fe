"""Query, page-of-results and list-state value types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Generic, Optional, Sequence, Tuple, TypeVar

from returns_tracker.errors import (
    ApiError,
    HttpStatusError,
    NetworkError,
    ReturnsTrackerError,
)

T = TypeVar("T")

DEFAULT_LIMIT = 10


@dataclass(frozen=True, slots=True)
class Query:
    """Committed search text plus the pagination window it is fetched with."""

    text: str = ""
    page: int = 1
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.limit <= 0:
            raise ValueError(f"limit must be > 0, got {self.limit}")

    @property
    def search(self) -> Optional[str]:
        """The search term, or None when the query is unfiltered."""
        return self.text or None

    def with_page(self, page: int) -> "Query":
        return replace(self, page=page)

    def to_params(self) -> Dict[str, Any]:
        """Query-string parameters. An empty search is omitted, never sent as ''."""
        params: Dict[str, Any] = {"page": self.page, "limit": self.limit}
        if self.text:
            params["search"] = self.text
        return params


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """A single page of items plus meta-data."""

    items: Sequence[T]
    total: int           # total items in the whole result set
    page: int = 1        # current page index (1-based)
    limit: int = DEFAULT_LIMIT

    # ------------- helpers -------------
    @property
    def pages(self) -> int:
        return max(1, (self.total + self.limit - 1) // self.limit)

    def has_next(self) -> bool:
        return self.page * self.limit < self.total


class ListStatus(Enum):
    IDLE = "idle"
    LOADING_INITIAL = "loading_initial"
    READY = "ready"
    LOADING_MORE = "loading_more"
    REFRESHING = "refreshing"
    FAILED = "failed"

    @property
    def is_busy(self) -> bool:
        return self in (
            ListStatus.LOADING_INITIAL,
            ListStatus.LOADING_MORE,
            ListStatus.REFRESHING,
        )


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """What the UI needs to know about a failed fetch."""

    kind: str                      # "network" | "http" | "api"
    message: str
    status_code: Optional[int] = None

    @classmethod
    def from_exception(cls, exc: ReturnsTrackerError) -> "ErrorInfo":
        if isinstance(exc, HttpStatusError):
            return cls("http", str(exc), exc.status_code)
        if isinstance(exc, NetworkError):
            return cls("network", str(exc))
        if isinstance(exc, ApiError):
            return cls("api", str(exc))
        return cls("api", str(exc))


@dataclass(frozen=True, slots=True)
class ListState(Generic[T]):
    """Immutable snapshot of a paginated list, handed to the renderer."""

    items: Tuple[T, ...] = ()
    page: int = 1
    has_more: bool = False
    status: ListStatus = ListStatus.IDLE
    last_error: Optional[ErrorInfo] = None
    query_seq: int = 0
    total: int = 0
    query: Query = field(default_factory=Query)

    def evolve(self, **changes: Any) -> "ListState[T]":
        return replace(self, **changes)
