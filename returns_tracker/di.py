# returns_tracker/di.py
"""
Very small dependency-injection helper.
"""

from __future__ import annotations

from typing import Any, Dict

from returns_tracker.api.client import ReturnsApiClient
from returns_tracker.services.return_service import ReturnService


class Container:
    """Holds lazily-created singletons."""

    def __init__(self, config: Dict[str, Any]) -> None:
        self._cfg = config
        self._api_client: ReturnsApiClient | None = None
        self._return_service: ReturnService | None = None

    @property
    def config(self) -> Dict[str, Any]:
        return self._cfg

    # ---------- infra ----------
    @property
    def api_client(self) -> ReturnsApiClient:
        if self._api_client is None:
            api_cfg = self._cfg.get("api", {})
            self._api_client = ReturnsApiClient(
                api_cfg.get("base_url", "http://localhost:8081/api/mobile"),
                timeout=api_cfg.get("timeout", 15),
            )
        return self._api_client

    # ---------- services ----------
    @property
    def return_service(self) -> ReturnService:
        if self._return_service is None:
            self._return_service = ReturnService(
                self.api_client,
                default_page_size=self._cfg.get("ui", {}).get("page_size", 10),
            )
        return self._return_service

    async def aclose(self) -> None:
        if self._api_client is not None:
            await self._api_client.aclose()


# convenience factory
def build_container(config: Dict[str, Any]) -> Container:
    """Create a container for the given config."""
    return Container(config)
