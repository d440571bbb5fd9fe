# returns_tracker/ui/controllers/status_bar.py
"""Formats and updates the status bar."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from returns_tracker.models.pagination import ListState, ListStatus
from returns_tracker.utils.formatters import format_count


class StatusBarController:
    """Builds the human-readable status text and writes it to the bar."""

    STATUS_STYLES = {
        ListStatus.IDLE: ("", "white"),
        ListStatus.LOADING_INITIAL: ("Loading...", "yellow"),
        ListStatus.REFRESHING: ("Refreshing...", "yellow"),
        ListStatus.LOADING_MORE: ("Loading more...", "blue"),
        ListStatus.READY: ("", "green"),
        ListStatus.FAILED: ("Error", "red"),
    }

    def __init__(self, status_bar: Static) -> None:
        self._bar = status_bar

    def update(self, state: ListState) -> None:
        """Refresh the whole status line from a list snapshot."""
        self._bar.update(self.render(state))

    def render(self, state: ListState) -> Text:
        pages = max(1, (state.total + state.query.limit - 1) // state.query.limit)
        parts: list[str] = [
            f"Returns: {format_count(len(state.items), state.total)}",
            f"Page: {state.page}/{pages}",
        ]
        if state.query.text:
            parts.append(f"Search: '{state.query.text}'")

        text = Text(" | ".join(parts))

        label, style = self.STATUS_STYLES[state.status]
        if state.status is ListStatus.READY:
            label = "More available" if state.has_more else "End of list"
        if label:
            text.append(" | ")
            text.append(label, style=style)
        return text
