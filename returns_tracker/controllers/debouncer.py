"""Turns a burst of keystrokes into one committed search value."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_QUIET_MS = 500


class SearchDebouncer:
    """
    Emits ``on_commit(text)`` once the input has been quiet for ``quiet_ms``.

    Every ``on_text_changed`` call cancels the pending emission and schedules
    a new one, so a burst of keystrokes yields a single commit carrying the
    last value. After :meth:`close` nothing is ever emitted again.
    """

    def __init__(
        self,
        on_commit: Callable[[str], None],
        *,
        quiet_ms: int = DEFAULT_QUIET_MS,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        if quiet_ms < 0:
            raise ValueError("quiet_ms must not be negative")
        self._on_commit = on_commit
        self._quiet = quiet_ms / 1000
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending_text: Optional[str] = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def on_text_changed(self, text: str) -> None:
        """Record a keystroke and (re)start the quiet-period timer."""
        if self._closed:
            return
        self._cancel_pending()
        self._pending_text = text
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self._quiet, self._fire)

    def seed(self, text: str = "") -> None:
        """Commit ``text`` right away, bypassing the quiet period (initial load)."""
        if self._closed:
            return
        self._cancel_pending()
        self._emit(text)

    def flush(self) -> None:
        """Commit the pending text now, if there is one."""
        if self._closed or self._handle is None:
            return
        text = self._pending_text or ""
        self._cancel_pending()
        self._emit(text)

    def close(self) -> None:
        """Teardown: drop any pending emission for good."""
        self._cancel_pending()
        self._closed = True

    # ------------------------------------------------------------------ #

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._pending_text = None

    def _fire(self) -> None:
        text = self._pending_text or ""
        self._handle = None
        self._pending_text = None
        if self._closed:
            return
        self._emit(text)

    def _emit(self, text: str) -> None:
        logger.debug(f"Search committed: {text!r}")
        self._on_commit(text)
