# returns_tracker/ui/screens/returns_screen.py
"""
Main Returns screen: debounced search over an infinitely scrolling table.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from returns_tracker.controllers.debouncer import DEFAULT_QUIET_MS, SearchDebouncer
from returns_tracker.models.pagination import ErrorInfo, ListState, ListStatus
from returns_tracker.models.return_record import ReturnRecord
from returns_tracker.services.return_service import ReturnService
from returns_tracker.ui.controllers.status_bar import StatusBarController
from returns_tracker.ui.screens.add_return_screen import AddReturnScreen
from returns_tracker.ui.widgets.loading_indicator import LoadingOverlay
from returns_tracker.ui.widgets.return_table import ReturnTable
from returns_tracker.ui.widgets.search_bar import SearchBar
from returns_tracker.utils.formatters import DEFAULT_DATE_FORMAT
from simple_logger import Slogger


class ReturnsScreen(Screen):
    """List of returns with search, load-more and refresh."""

    BINDINGS = [
        Binding("ctrl+r", "refresh", "Refresh", show=True),
        Binding("ctrl+l", "load_more", "Load More", show=True),
        Binding("ctrl+n", "add_return", "Add Return", show=True),
        Binding("ctrl+f", "focus_search", "Search", show=True),
    ]

    # ------------------------------------------------------------------ #

    def __init__(
        self,
        return_service: ReturnService,
        config: Dict[str, Any],
        *,
        id: str = "returns_screen",
    ) -> None:
        super().__init__(id=id)

        ui_cfg = config.get("ui", {})
        self.config = config
        self.date_format = ui_cfg.get("date_format", DEFAULT_DATE_FORMAT)
        self.load_more_threshold = ui_cfg.get("load_more_threshold", 3)

        self.return_service = return_service
        self.controller = return_service.list_controller()
        self.debouncer = SearchDebouncer(
            self._on_search_committed,
            quiet_ms=ui_cfg.get("debounce_ms", DEFAULT_QUIET_MS),
        )
        self._reported_error: Optional[ErrorInfo] = None

    # ------------------------------------------------------------------ #
    # Compose & mount
    # ------------------------------------------------------------------ #

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Container(id="main-container"):
            with Vertical(id="content-area"):
                yield SearchBar(id="search-bar")
                yield Static("", id="list-message")
                yield ReturnTable(
                    threshold=self.load_more_threshold,
                    date_format=self.date_format,
                    id="returns-table",
                )
            yield LoadingOverlay(id="loading-overlay", message="Loading returns...")

        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(ReturnTable).styles.height = "1fr"
        self.status_controller = StatusBarController(self.query_one("#status-bar", Static))

        self.controller.subscribe(self._render_state)
        self._render_state(self.controller.state)

        # Initial unfiltered load runs straight away, not after the quiet period
        self.debouncer.seed("")

    def on_unmount(self) -> None:
        self.debouncer.close()
        self.controller.close()

    # ------------------------------------------------------------------ #
    # Search pipeline
    # ------------------------------------------------------------------ #

    def on_search_bar_changed(self, event: SearchBar.Changed) -> None:
        self.debouncer.on_text_changed(event.value)

    def on_search_bar_submitted(self, event: SearchBar.Submitted) -> None:
        self.debouncer.flush()

    def _on_search_committed(self, text: str) -> None:
        Slogger.debug("Search committed", {"screen": "ReturnsScreen", "query": text})
        self.run_worker(self.controller.search(text), group="returns-fetch")

    # ------------------------------------------------------------------ #
    # Action handlers
    # ------------------------------------------------------------------ #

    def action_focus_search(self) -> None:
        self.query_one(SearchBar).focus_input()

    def action_load_more(self) -> None:
        if self.controller.can_load_more():
            self.run_worker(self.controller.load_more(), group="returns-fetch")

    def action_refresh(self) -> None:
        self.run_worker(self.controller.refresh(), group="returns-fetch")

    def action_add_return(self) -> None:
        Slogger.info("Opening AddReturnScreen")
        self.app.push_screen(AddReturnScreen(self.return_service), self._on_add_return_closed)

    def on_return_table_near_end(self, event: ReturnTable.NearEnd) -> None:
        self.action_load_more()

    def _on_add_return_closed(self, created: Optional[ReturnRecord]) -> None:
        # No local insert: reload so the list reflects the server's ordering
        if created is not None:
            self.action_refresh()

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def _render_state(self, state: ListState[ReturnRecord]) -> None:
        self.query_one(ReturnTable).show_records(state.items)
        self.status_controller.update(state)

        overlay = self.query_one(LoadingOverlay)
        if state.status is ListStatus.LOADING_INITIAL:
            overlay.start("Loading returns...")
        elif state.status is ListStatus.REFRESHING and not state.items:
            overlay.start("Refreshing...")
        else:
            overlay.stop()

        failed = state.status is ListStatus.FAILED and state.last_error is not None
        if failed:
            text = f"Could not load returns: {state.last_error.message}. Press Ctrl+R to retry."
        elif state.status is ListStatus.READY and not state.items:
            text = "No returns found matching your search" if state.query.text else "No returns yet"
        else:
            text = ""
        message = self.query_one("#list-message", Static)
        message.update(text)
        message.set_class(failed, "error")
        message.display = bool(text)

        self._report_transient_error(state)

    def _report_transient_error(self, state: ListState[ReturnRecord]) -> None:
        """Load-more failures keep the list and show a toast once."""
        error = state.last_error
        if error is None or error is self._reported_error:
            return
        self._reported_error = error
        if state.status is ListStatus.READY:
            Slogger.warning(
                "Loading more returns failed",
                {"screen": "ReturnsScreen", "page": state.page + 1, "error": error.message},
            )
            self.notify(
                f"Could not load more returns: {error.message}",
                title="Load More Failed",
                severity="warning",
                timeout=5,
            )
        elif state.status is ListStatus.FAILED:
            Slogger.error(
                "Loading returns failed",
                {"screen": "ReturnsScreen", "query": state.query.text, "error": error.message},
            )
