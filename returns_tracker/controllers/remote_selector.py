"""Fetch-once picker for small reference datasets (stores, channels)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Generic, List, Optional, Tuple, TypeVar

from returns_tracker.controllers.observable import Observable
from returns_tracker.errors import ReturnsTrackerError
from returns_tracker.models.pagination import ErrorInfo
from returns_tracker.models.reference import SelectableItem

logger = logging.getLogger(__name__)

I = TypeVar("I", bound=SelectableItem)


@dataclass(frozen=True)
class SelectorState(Generic[I]):
    all_items: Tuple[I, ...] = ()
    selected: Optional[I] = None
    query: str = ""
    is_open: bool = False
    loading: bool = False
    loaded: bool = False
    last_error: Optional[ErrorInfo] = None

    @property
    def visible_items(self) -> List[I]:
        return filter_items(self.all_items, self.query)


def filter_items(items, substring: str) -> list:
    """Items whose ``code`` or ``name`` contains ``substring``, case-insensitively."""
    if not substring:
        return list(items)
    return [item for item in items if item.matches(substring)]


class RemoteSelector(Observable[SelectorState[I]], Generic[I]):
    """
    Loads the whole candidate set once, then filters it in memory.

    The backing sets are small, so there is no paging and no per-keystroke
    request. A failed load leaves the selector empty until ``reload()`` is
    called again.
    """

    def __init__(
        self,
        fetch_items: Callable[[], Awaitable[List[I]]],
        *,
        label: str = "item",
        on_change: Optional[Callable[[Optional[I]], None]] = None,
    ) -> None:
        super().__init__()
        self._fetch_items = fetch_items
        self.label = label
        self._on_change = on_change
        self._load_seq = 0
        self._state: SelectorState[I] = SelectorState()

    @property
    def state(self) -> SelectorState[I]:
        return self._state

    @property
    def all_items(self) -> Tuple[I, ...]:
        return self._state.all_items

    @property
    def selected(self) -> Optional[I]:
        return self._state.selected

    # ------------------------------------------------------------------ #

    async def reload(self) -> None:
        """Fetch the full, unfiltered candidate set."""
        self._load_seq += 1
        seq = self._load_seq
        self._set(loading=True, last_error=None)
        logger.info(f"Loading items for {self.label}...")

        try:
            items = await self._fetch_items()
        except ReturnsTrackerError as e:
            if seq != self._load_seq:
                return
            logger.error(f"Error fetching items for {self.label}: {e}")
            self._set(
                all_items=(),
                loading=False,
                loaded=False,
                last_error=ErrorInfo.from_exception(e),
            )
            return

        if seq != self._load_seq:
            return
        logger.info(f"Fetched {len(items)} items for {self.label}")
        self._set(all_items=tuple(items), loading=False, loaded=True, last_error=None)

    def filter(self, substring: str) -> List[I]:
        return filter_items(self._state.all_items, substring)

    def set_query(self, substring: str) -> None:
        self._set(query=substring)

    def open(self) -> None:
        self._set(is_open=True)

    def close(self) -> None:
        self._set(is_open=False, query="")

    def select(self, item: I) -> None:
        """Commit ``item``, close the picker and forget the filter text."""
        self._set(selected=item, is_open=False, query="")
        if self._on_change is not None:
            self._on_change(item)

    def clear(self) -> None:
        self._set(selected=None)
        if self._on_change is not None:
            self._on_change(None)

    def _set(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        self._publish(self._state)
