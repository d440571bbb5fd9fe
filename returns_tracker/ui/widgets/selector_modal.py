"""
Modal picker over a RemoteSelector: filter box plus option list.
"""

from __future__ import annotations

from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, OptionList, Static
from textual.widgets.option_list import Option

from returns_tracker.controllers.remote_selector import RemoteSelector, SelectorState
from returns_tracker.models.reference import SelectableItem


class SelectorModal(ModalScreen[Optional[SelectableItem]]):
    """Lets the user pick one item; dismisses with the item or None."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("ctrl+r", "retry", "Retry"),
    ]

    def __init__(
        self,
        selector: RemoteSelector,
        *,
        id: str | None = None,
        name: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, name=name, classes=classes)
        self.selector = selector
        self._visible: List[SelectableItem] = []

    def compose(self) -> ComposeResult:
        label = self.selector.label
        with Container(id="selector-container"):
            with Horizontal(id="selector-header"):
                yield Label(f"Select {label}", id="selector-title")
                yield Button("Cancel", id="selector-cancel")
            yield Input(placeholder=f"Search {label.lower()}...", id="selector-search")
            yield OptionList(id="selector-options")
            yield Static("", id="selector-empty")

    def on_mount(self) -> None:
        self.selector.subscribe(self._render_state)
        self.selector.open()
        self.query_one("#selector-search", Input).focus()

    def on_unmount(self) -> None:
        self.selector.unsubscribe(self._render_state)

    # ------------------------------------------------------------------ #

    def _render_state(self, state: SelectorState) -> None:
        options = self.query_one("#selector-options", OptionList)
        empty = self.query_one("#selector-empty", Static)

        self._visible = state.visible_items
        options.clear_options()
        options.add_options(
            Option(Text.assemble((item.name, "bold"), "  ", (item.code, "dim")), id=str(index))
            for index, item in enumerate(self._visible)
        )

        if state.loading:
            empty.update("Loading...")
        elif state.last_error is not None:
            empty.update(
                f"Could not load {self.selector.label.lower()}s: {state.last_error.message}. "
                "Press Ctrl+R to retry."
            )
        elif not self._visible:
            empty.update(
                "No items found matching your search" if state.query else "No items available"
            )
        else:
            empty.update("")
        empty.display = bool(state.loading or state.last_error or not self._visible)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "selector-search":
            self.selector.set_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        # Enter picks the only remaining match
        if event.input.id == "selector-search" and len(self._visible) == 1:
            self._choose(self._visible[0])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if 0 <= event.option_index < len(self._visible):
            self._choose(self._visible[event.option_index])

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "selector-cancel":
            self.action_cancel()

    def _choose(self, item: SelectableItem) -> None:
        self.selector.select(item)
        self.dismiss(item)

    def action_cancel(self) -> None:
        self.selector.close()
        self.dismiss(None)

    def action_retry(self) -> None:
        # owned by the app so closing the picker does not cancel the load
        self.app.run_worker(self.selector.reload(), group="selector-load", exclusive=True)
