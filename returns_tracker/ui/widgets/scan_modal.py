"""
Modal that receives a code from a barcode scanner working as a keyboard.
"""

from __future__ import annotations

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Input, Label, Static

from returns_tracker.controllers.scan_input import ScanInputHelper
from simple_logger import Slogger


class ScanModal(ModalScreen[Optional[str]]):
    """Dismisses with the scanned code, or None when closed."""

    BINDINGS = [
        ("escape", "close", "Close"),
    ]

    def __init__(
        self,
        helper: ScanInputHelper,
        *,
        id: str | None = None,
        name: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, name=name, classes=classes)
        self.helper = helper

    def compose(self) -> ComposeResult:
        with Container(id="scan-container"):
            yield Label("Scan Barcode or QR Code", id="scan-title")
            yield Label(
                "Scan the label, or type the code and press Enter",
                classes="subheading",
            )
            yield Input(placeholder="Waiting for scan...", id="scan-input")
            yield Static("", id="scan-status")

    def on_mount(self) -> None:
        self.query_one("#scan-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        raw = event.value
        code = self.helper.accept(raw)
        if code is None:
            status = self.query_one("#scan-status", Static)
            if ScanInputHelper.normalize(raw):
                status.update("Already scanned, waiting for the next label")
            else:
                status.update("Nothing was scanned")
            event.input.value = ""
            return

        Slogger.info("Barcode scanned", {"screen": "ScanModal", "code": code})
        self.dismiss(code)

    def action_close(self) -> None:
        self.dismiss(None)
