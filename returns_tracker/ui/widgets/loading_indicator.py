"""
Busy overlay shown while a returns request is in flight.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, LoadingIndicator


class LoadingOverlay(Vertical):
    """Spinner plus a one-line message, hidden until :meth:`start`."""

    def __init__(
        self,
        message: str = "Loading...",
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._message = message
        self.display = False

    def compose(self) -> ComposeResult:
        with Vertical(classes="loading-box"):
            yield LoadingIndicator()
            yield Label(self._message, classes="loading-message")

    def start(self, message: str | None = None) -> None:
        if message and message != self._message:
            self._message = message
            for label in self.query(".loading-message").results(Label):
                label.update(message)
        self.display = True

    def stop(self) -> None:
        self.display = False
