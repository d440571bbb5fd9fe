"""UI-independent controllers: debounced search, paginated lists, pickers."""

from returns_tracker.controllers.debouncer import SearchDebouncer
from returns_tracker.controllers.list_controller import PaginatedListController
from returns_tracker.controllers.remote_selector import RemoteSelector, SelectorState
from returns_tracker.controllers.scan_input import ScanInputHelper

__all__ = [
    "PaginatedListController",
    "RemoteSelector",
    "ScanInputHelper",
    "SearchDebouncer",
    "SelectorState",
]
