"""Shared fixtures for the returns tracker tests."""

import asyncio
from typing import Any, Dict, List, Tuple

from returns_tracker.models.pagination import Page, Query


def store_doc(id: int = 1, code: str = "S1", name: str = "Main") -> Dict[str, Any]:
    return {
        "id": id,
        "code": code,
        "name": name,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


def channel_doc(id: int = 1, code: str = "C1", name: str = "Online") -> Dict[str, Any]:
    return {
        "id": id,
        "code": code,
        "name": name,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


def return_doc(id: int = 1, tracking: str = "TRK0001") -> Dict[str, Any]:
    return {
        "id": id,
        "tracking": tracking,
        "channel_id": 1,
        "store_id": 1,
        "created_at": "2024-03-01T10:00:00Z",
        "updated_at": "2024-03-01T10:00:00Z",
        "channel": channel_doc(),
        "store": store_doc(),
    }


def envelope(data: Any, success: bool = True, message: str = "OK") -> Dict[str, Any]:
    return {"success": success, "message": message, "data": data}


def make_page(query: Query, total: int, count: int | None = None) -> Page[str]:
    """A page of string items labelled with the query text and position."""
    start = (query.page - 1) * query.limit
    if count is None:
        count = max(0, min(query.limit, total - start))
    items = [f"{query.text or '*'}-{start + i}" for i in range(count)]
    return Page(items=items, total=total, page=query.page, limit=query.limit)


class ControlledFetcher:
    """Page fetcher whose calls stay pending until the test resolves them."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Query, asyncio.Future]] = []

    async def __call__(self, query: Query) -> Page[str]:
        future = asyncio.get_running_loop().create_future()
        self.calls.append((query, future))
        return await future

    @property
    def queries(self) -> List[Query]:
        return [query for query, _ in self.calls]

    def resolve(self, index: int, total: int, count: int | None = None) -> None:
        query, future = self.calls[index]
        future.set_result(make_page(query, total, count))

    def fail(self, index: int, error: Exception) -> None:
        self.calls[index][1].set_exception(error)


class FakeTimerHandle:
    def __init__(self, when: float, callback) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Just enough of an event loop for call_later-based timers."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: List[FakeTimerHandle] = []

    def call_later(self, delay, callback, *args):
        handle = FakeTimerHandle(self.now + delay, lambda: callback(*args))
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for handle in sorted(self.handles, key=lambda h: h.when):
            if not handle.cancelled and not handle.fired and handle.when <= self.now:
                handle.fired = True
                handle.callback()
