"""Paginated, searchable list state driven by an async page fetcher.

The controller owns one :class:`ListState` and replaces it on every
transition. Fetches may overlap (a new search commits while a load-more is
still on the wire); every fetch remembers the ``query_seq`` it was issued
under and its result is applied only if that generation is still current.
Older results are dropped, never cancelled.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from returns_tracker.controllers.observable import Observable
from returns_tracker.errors import ReturnsTrackerError
from returns_tracker.models.pagination import (
    DEFAULT_LIMIT,
    ErrorInfo,
    ListState,
    ListStatus,
    Page,
    Query,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[Query], Awaitable[Page[T]]]


class PaginatedListController(Observable[ListState[T]], Generic[T]):
    """Drives reset / load-more / refresh against a page fetcher."""

    def __init__(
        self,
        fetch: PageFetcher,
        *,
        limit: int = DEFAULT_LIMIT,
        name: str = "list",
    ) -> None:
        super().__init__()
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")
        self._fetch = fetch
        self._limit = limit
        self.name = name
        self._closed = False
        self._state: ListState[T] = ListState(query=Query(limit=limit))

    # -- properties --------------------------------------------------------

    @property
    def state(self) -> ListState[T]:
        return self._state

    @property
    def query(self) -> Query:
        """The currently committed query (always page 1)."""
        return self._state.query

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def closed(self) -> bool:
        return self._closed

    def can_load_more(self) -> bool:
        return (
            not self._closed
            and self._state.status is ListStatus.READY
            and self._state.has_more
        )

    # -- public API --------------------------------------------------------

    async def search(self, text: str) -> None:
        """Commit new search text and load its first page."""
        await self.reset(Query(text=text, page=1, limit=self._limit))

    async def reset(self, query: Query, *, refreshing: bool = False) -> None:
        """
        Start a new query generation and load page 1.

        A plain reset clears the list at once; a refresh keeps the current
        items on screen until the new first page replaces them. Either way
        a failure leaves the list empty.
        """
        if self._closed:
            return

        query = Query(text=query.text, page=1, limit=self._limit)
        seq = self._state.query_seq + 1
        if refreshing:
            self._set(
                self._state.evolve(
                    status=ListStatus.REFRESHING,
                    page=1,
                    last_error=None,
                    query_seq=seq,
                    query=query,
                )
            )
        else:
            self._set(
                ListState(
                    status=ListStatus.LOADING_INITIAL,
                    query_seq=seq,
                    query=query,
                )
            )

        try:
            page = await self._fetch(query)
        except ReturnsTrackerError as e:
            if not self._is_current(seq):
                self._log_stale(seq, "reset failure")
                return
            logger.warning(f"[{self.name}] initial load failed for {query.text!r}: {e}")
            self._set(
                ListState(
                    status=ListStatus.FAILED,
                    last_error=ErrorInfo.from_exception(e),
                    query_seq=seq,
                    query=query,
                )
            )
            return

        if not self._is_current(seq):
            self._log_stale(seq, "reset result")
            return

        self._set(
            ListState(
                items=tuple(page.items),
                page=1,
                has_more=self._has_more(1, page.total),
                status=ListStatus.READY,
                query_seq=seq,
                total=page.total,
                query=query,
            )
        )

    async def load_more(self) -> None:
        """Append the next page. No-op unless the list is idle and has more."""
        if not self.can_load_more():
            return

        seq = self._state.query_seq
        next_page = self._state.page + 1
        self._set(self._state.evolve(status=ListStatus.LOADING_MORE))

        try:
            page = await self._fetch(self._state.query.with_page(next_page))
        except ReturnsTrackerError as e:
            if not self._is_current(seq):
                self._log_stale(seq, "load-more failure")
                return
            logger.warning(f"[{self.name}] loading page {next_page} failed: {e}")
            self._set(
                self._state.evolve(
                    status=ListStatus.READY,
                    last_error=ErrorInfo.from_exception(e),
                )
            )
            return

        if not self._is_current(seq):
            self._log_stale(seq, "load-more result")
            return

        self._set(
            self._state.evolve(
                items=self._state.items + tuple(page.items),
                page=next_page,
                has_more=self._has_more(next_page, page.total),
                status=ListStatus.READY,
                last_error=None,
                total=page.total,
            )
        )

    async def refresh(self) -> None:
        """Reload page 1 of the committed query, replacing the list."""
        await self.reset(self._state.query, refreshing=True)

    def close(self) -> None:
        """Teardown. Results still on the wire will be discarded."""
        if self._closed:
            return
        self._closed = True
        self._state = self._state.evolve(query_seq=self._state.query_seq + 1)
        self.clear_all_subscriptions()

    # -- internal ----------------------------------------------------------

    def _has_more(self, page: int, total: int) -> bool:
        return page * self._limit < total

    def _is_current(self, seq: int) -> bool:
        return not self._closed and seq == self._state.query_seq

    def _log_stale(self, seq: int, what: str) -> None:
        logger.debug(
            f"[{self.name}] dropping stale {what} (seq {seq}, current {self._state.query_seq})"
        )

    def _set(self, state: ListState[T]) -> None:
        self._state = state
        self._publish(state)
