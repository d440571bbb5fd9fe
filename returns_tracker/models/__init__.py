"""Returns Tracker data models."""

from returns_tracker.models.pagination import (
    ErrorInfo,
    ListState,
    ListStatus,
    Page,
    Query,
)
from returns_tracker.models.reference import Channel, SelectableItem, Store
from returns_tracker.models.return_record import CreateReturnRequest, ReturnRecord

__all__ = [
    "Channel",
    "CreateReturnRequest",
    "ErrorInfo",
    "ListState",
    "ListStatus",
    "Page",
    "Query",
    "ReturnRecord",
    "SelectableItem",
    "Store",
]
