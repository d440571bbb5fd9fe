"""Normalizes codes delivered by a barcode scanner acting as a keyboard."""

from __future__ import annotations

import time
from typing import Callable, Optional

DEFAULT_COOLDOWN_SECONDS = 2.0


class ScanInputHelper:
    """
    Cleans up scanned text and swallows repeat reads of the same code.

    Handheld scanners often fire twice for one label; the same code seen
    again within ``cooldown`` seconds is ignored.
    """

    def __init__(
        self,
        cooldown: float = DEFAULT_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.cooldown = cooldown
        self._clock = clock
        self._last_code: Optional[str] = None
        self._last_at = 0.0

    @staticmethod
    def normalize(raw: str) -> str:
        return "".join(ch for ch in raw if ch.isprintable()).strip()

    def accept(self, raw: str) -> Optional[str]:
        """Return the cleaned code, or None if it is empty or a repeat."""
        code = self.normalize(raw)
        if not code:
            return None

        now = self._clock()
        if code == self._last_code and now - self._last_at < self.cooldown:
            return None

        self._last_code = code
        self._last_at = now
        return code

    def reset(self) -> None:
        self._last_code = None
        self._last_at = 0.0
