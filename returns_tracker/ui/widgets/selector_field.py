"""
Form field that shows the current selection of a RemoteSelector and opens
a SelectorModal to change it.
"""

from __future__ import annotations

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Button, Label

from returns_tracker.controllers.remote_selector import RemoteSelector, SelectorState
from returns_tracker.models.pagination import ErrorInfo
from returns_tracker.ui.widgets.selector_modal import SelectorModal
from simple_logger import Slogger


class SelectorField(Container):
    """Label, value button and per-field error line for one picker."""

    def __init__(
        self,
        label: str,
        placeholder: str,
        selector: RemoteSelector,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.label = label
        self.placeholder = placeholder
        self.selector = selector
        self._reported_error: Optional[ErrorInfo] = None

    def compose(self) -> ComposeResult:
        yield Label(self.label, classes="input-label")
        yield Button(self.placeholder, classes="selector-value")
        yield Label("", classes="field-error")

    def on_mount(self) -> None:
        self.query_one(".field-error", Label).display = False
        self.selector.subscribe(self._on_state)
        self._on_state(self.selector.state)
        self.run_worker(self.selector.reload(), group=f"load-{self.selector.label}")

    def on_unmount(self) -> None:
        self.selector.unsubscribe(self._on_state)

    # ------------------------------------------------------------------ #

    def _on_state(self, state: SelectorState) -> None:
        button = self.query_one(".selector-value", Button)
        if state.selected is not None:
            button.label = state.selected.label()
            button.add_class("has-value")
        else:
            button.label = self.placeholder
            button.remove_class("has-value")

        # Report each load failure once; retry lives in the picker
        if state.last_error is not None and state.last_error is not self._reported_error:
            self._reported_error = state.last_error
            Slogger.error(
                f"Failed to fetch {self.selector.label.lower()}s",
                {"widget": "SelectorField", "error": state.last_error.message},
            )
            self.app.notify(
                f"Failed to fetch {self.selector.label.lower()}s: {state.last_error.message}",
                title="Error",
                severity="error",
            )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.app.push_screen(SelectorModal(self.selector))

    def set_error(self, message: Optional[str]) -> None:
        """Show or hide the field's validation message."""
        error_label = self.query_one(".field-error", Label)
        error_label.update(message or "")
        error_label.display = bool(message)
        self.set_class(bool(message), "has-error")
