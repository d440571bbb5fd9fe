# returns_tracker/services/return_service.py
"""
Business-logic layer for returns. Works with domain models and Page container.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from returns_tracker.api.client import ReturnsApiClient
from returns_tracker.controllers.list_controller import PaginatedListController
from returns_tracker.controllers.remote_selector import RemoteSelector
from returns_tracker.errors import ValidationError
from returns_tracker.models.pagination import DEFAULT_LIMIT, Page, Query
from returns_tracker.models.reference import Channel, SelectableItem, Store
from returns_tracker.models.return_record import CreateReturnRequest, ReturnRecord

logger = logging.getLogger(__name__)

TRACKING_REQUIRED = "Tracking number is required"
CHANNEL_REQUIRED = "Channel is required"
STORE_REQUIRED = "Store is required"


class ReturnService:
    """Handles all return-related use-cases."""

    def __init__(
        self,
        client: ReturnsApiClient,
        *,
        default_page_size: int = DEFAULT_LIMIT,
    ) -> None:
        self._client = client
        self._per_page = default_page_size

    @property
    def page_size(self) -> int:
        return self._per_page

    # --------------------------------------------------------------------- #
    # read side
    # --------------------------------------------------------------------- #

    async def fetch_page(self, query: Query) -> Page[ReturnRecord]:
        """Return one Page of returns for ``query``."""
        return await self._client.fetch_returns(query)

    async def fetch_stores(self) -> List[Store]:
        return await self._client.fetch_stores()

    async def fetch_channels(self) -> List[Channel]:
        return await self._client.fetch_channels()

    def list_controller(self) -> PaginatedListController[ReturnRecord]:
        """A fresh controller for one returns list screen."""
        return PaginatedListController(
            self.fetch_page, limit=self._per_page, name="returns"
        )

    def store_selector(self, on_change=None) -> RemoteSelector[Store]:
        return RemoteSelector(self.fetch_stores, label="Store", on_change=on_change)

    def channel_selector(self, on_change=None) -> RemoteSelector[Channel]:
        return RemoteSelector(self.fetch_channels, label="Channel", on_change=on_change)

    # --------------------------------------------------------------------- #
    # write side
    # --------------------------------------------------------------------- #

    @staticmethod
    def validate(
        tracking: str,
        channel: Optional[SelectableItem],
        store: Optional[SelectableItem],
    ) -> Dict[str, str]:
        """Per-field error messages; empty when the form can be submitted."""
        errors: Dict[str, str] = {}
        if not (tracking or "").strip():
            errors["tracking"] = TRACKING_REQUIRED
        if channel is None:
            errors["channel"] = CHANNEL_REQUIRED
        if store is None:
            errors["store"] = STORE_REQUIRED
        return errors

    async def create_return(
        self,
        tracking: str,
        channel: Optional[SelectableItem],
        store: Optional[SelectableItem],
    ) -> ReturnRecord:
        """
        Validate the form and persist a new return.

        Raises:
            ValidationError: a required field is missing (nothing is sent)
            NetworkError / HttpStatusError / ApiError: the request itself failed
        """
        errors = self.validate(tracking, channel, store)
        if errors:
            raise ValidationError(errors)

        request = CreateReturnRequest(
            channel_id=channel.id,
            store_id=store.id,
            tracking=tracking.strip(),
        )
        created = await self._client.create_return(request)
        logger.info(f"Created return {created.id} for tracking {created.tracking!r}")
        return created
