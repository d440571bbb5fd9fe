"""
Screen for adding a new return record.
"""

from __future__ import annotations

from typing import Dict, Optional

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label

from returns_tracker.controllers.scan_input import ScanInputHelper
from returns_tracker.errors import ApiError, ReturnsTrackerError, ValidationError
from returns_tracker.models.return_record import ReturnRecord
from returns_tracker.services.return_service import ReturnService
from returns_tracker.ui.widgets.loading_indicator import LoadingOverlay
from returns_tracker.ui.widgets.scan_modal import ScanModal
from returns_tracker.ui.widgets.selector_field import SelectorField
from simple_logger import Slogger


class AddReturnScreen(Screen[Optional[ReturnRecord]]):
    """Form for a new return. Dismisses with the created record, or None."""

    BINDINGS = [
        ("escape", "go_back", "Back to Returns"),
        ("ctrl+s", "submit", "Create Return"),
        ("ctrl+b", "scan", "Scan Barcode"),
    ]

    def __init__(
        self,
        return_service: ReturnService,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ):
        """
        Initialize the AddReturnScreen with required dependencies.

        Args:
            return_service: Service used for the pickers and for creating the return
        """
        super().__init__(name=name, id=id, classes=classes)
        self.return_service = return_service
        self.submitting = False
        self.scan_helper = ScanInputHelper()

        self.channel_selector = return_service.channel_selector(
            on_change=lambda item: self._clear_error("channel")
        )
        self.store_selector = return_service.store_selector(
            on_change=lambda item: self._clear_error("store")
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Container(id="add-return-container"):
            with Container(id="add-return-title-section"):
                yield Label("Add Return", id="page-title", classes="heading")
                yield Label("Scan or type the tracking number, then pick channel and store",
                            classes="subheading")

            # Tracking number with scan button
            yield Label("Tracking Number *", classes="input-label")
            with Horizontal(id="tracking-row"):
                yield Input(placeholder="Enter tracking number", id="tracking-input")
                yield Button("Scan", variant="primary", id="scan-button")
            yield Label("", id="tracking-error", classes="field-error")

            yield SelectorField(
                "Channel *", "Select a channel", self.channel_selector, id="channel-field"
            )
            yield SelectorField(
                "Store *", "Select a store", self.store_selector, id="store-field"
            )

            with Horizontal(id="action-buttons"):
                yield Button("Cancel", variant="primary", id="cancel-button")
                yield Button("Create Return", variant="success", id="submit-button")

            yield LoadingOverlay(id="loading-overlay", message="Creating...")

        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#tracking-error", Label).display = False
        self.query_one("#tracking-input", Input).focus()

    # ------------------------------------------------------------------ #
    # Event handlers
    # ------------------------------------------------------------------ #

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id

        if button_id == "cancel-button":
            self.action_go_back()
        elif button_id == "submit-button":
            self.action_submit()
        elif button_id == "scan-button":
            self.action_scan()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "tracking-input":
            self._clear_error("tracking")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "tracking-input":
            self.action_submit()

    # ------------------------------------------------------------------ #
    # Actions
    # ------------------------------------------------------------------ #

    def action_go_back(self) -> None:
        if not self.submitting:
            self.dismiss(None)

    def action_scan(self) -> None:
        self.app.push_screen(ScanModal(self.scan_helper), self._on_scanned)

    def _on_scanned(self, code: Optional[str]) -> None:
        if not code:
            return
        self.query_one("#tracking-input", Input).value = code
        self._clear_error("tracking")

    def action_submit(self) -> None:
        if self.submitting:
            return

        tracking = self.query_one("#tracking-input", Input).value
        errors = self.return_service.validate(
            tracking, self.channel_selector.selected, self.store_selector.selected
        )
        self._show_errors(errors)
        if errors:
            self.notify("Please fill in the required fields", title="Missing Fields", severity="warning")
            return

        self.run_worker(self.submit_return(tracking), group="create-return", exclusive=True)

    async def submit_return(self, tracking: str) -> None:
        """Send the create request and leave the screen on success."""
        context = {
            "screen": "AddReturnScreen",
            "tracking": tracking.strip(),
            "channel_id": getattr(self.channel_selector.selected, "id", None),
            "store_id": getattr(self.store_selector.selected, "id", None),
        }
        self._set_submitting(True)
        Slogger.info("Creating return", context)

        try:
            created = await self.return_service.create_return(
                tracking, self.channel_selector.selected, self.store_selector.selected
            )
        except ValidationError as e:
            self._set_submitting(False)
            self._show_errors(e.errors)
            return
        except ApiError as e:
            self._set_submitting(False)
            Slogger.error(f"Server rejected return: {e}", context)
            self.notify(str(e) or "Failed to create return", title="Error", severity="error")
            return
        except ReturnsTrackerError as e:
            self._set_submitting(False)
            Slogger.exception(e, "Error creating return", context)
            self.notify("Failed to create return. Please try again.", title="Error", severity="error")
            return

        self._set_submitting(False)
        Slogger.info(f"Return {created.id} created", context)
        self.notify("Return created successfully!", title="Success", severity="information")
        self.dismiss(created)

    # ------------------------------------------------------------------ #
    # helpers
    # ------------------------------------------------------------------ #

    def _set_submitting(self, submitting: bool) -> None:
        self.submitting = submitting
        button = self.query_one("#submit-button", Button)
        button.disabled = submitting
        button.label = "Creating..." if submitting else "Create Return"
        overlay = self.query_one(LoadingOverlay)
        if submitting:
            overlay.start("Creating...")
        else:
            overlay.stop()

    def _show_errors(self, errors: Dict[str, str]) -> None:
        self._set_tracking_error(errors.get("tracking"))
        self.query_one("#channel-field", SelectorField).set_error(errors.get("channel"))
        self.query_one("#store-field", SelectorField).set_error(errors.get("store"))

    def _clear_error(self, field: str) -> None:
        if not self.is_mounted:
            return
        if field == "tracking":
            self._set_tracking_error(None)
        else:
            self.query_one(f"#{field}-field", SelectorField).set_error(None)

    def _set_tracking_error(self, message: Optional[str]) -> None:
        error_label = self.query_one("#tracking-error", Label)
        error_label.update(message or "")
        error_label.display = bool(message)
        self.query_one("#tracking-input", Input).set_class(bool(message), "has-error")
