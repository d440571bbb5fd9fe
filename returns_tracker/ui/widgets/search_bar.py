"""
Search bar widget for filtering returns
"""

from typing import Optional

from textual.containers import Container
from textual.message import Message
from textual.widgets import Input


class SearchBar(Container):
    """
    Search input that reports every keystroke and every Enter.

    Debouncing is not done here; the owning screen forwards ``Changed`` to
    its SearchDebouncer and ``Submitted`` flushes it.
    """

    class Changed(Message):
        """Raw text changed (one per keystroke)"""
        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Submitted(Message):
        """Enter pressed in the search input"""
        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(
        self,
        *,
        placeholder: str = "Search returns by tracking number...",
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._placeholder = placeholder

    def compose(self):
        """Create child widgets"""
        yield Input(placeholder=self._placeholder, id="search-input")

    @property
    def value(self) -> str:
        return self.query_one("#search-input", Input).value

    def focus_input(self) -> None:
        """Focus the search input"""
        self.query_one("#search-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            event.stop()
            self.post_message(self.Changed(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submission (Enter key)"""
        if event.input.id == "search-input":
            event.stop()
            self.post_message(self.Submitted(event.value))
