"""
Main Textual application class for the Returns Tracker
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from textual.app import App
from textual.binding import Binding

from returns_tracker.di import Container, build_container
from returns_tracker.ui.screens.returns_screen import ReturnsScreen
from simple_logger import Slogger


class ReturnsApp(App):
    """Terminal front-end for browsing and creating returns."""

    TITLE = "Returns"

    CSS_PATH = [
        # Main CSS should be first as it sets global styles
        "css/main.tcss",
        "css/add_return_screen.tcss",
        "css/selector.tcss",
        "css/scan_modal.tcss",
    ]

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(self, config: Dict[str, Any], container: Optional[Container] = None) -> None:
        super().__init__()
        self.config = config
        self.container: Container = container or build_container(config)

    def on_mount(self) -> None:
        Slogger.info(
            "Returns app started",
            {"api": self.config.get("api", {}).get("base_url")},
        )
        self.push_screen(
            ReturnsScreen(
                return_service=self.container.return_service,
                config=self.config,
                id="returns_screen",
            )
        )

    async def on_unmount(self) -> None:
        await self.container.aclose()
        Slogger.info("Returns app stopped")
