# returns_tracker/api/client.py
"""
Async REST client for the returns backend, built on curl_cffi.

Each public coroutine performs exactly one request and either returns
typed models or raises one of the errors from ``returns_tracker.errors``.
There is no retry here; callers decide whether to try again.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from curl_cffi import requests

from returns_tracker.errors import HttpStatusError, NetworkError, SchemaError
from returns_tracker.models.envelope import require, require_list, unwrap
from returns_tracker.models.pagination import Page, Query
from returns_tracker.models.reference import Channel, Store
from returns_tracker.models.return_record import CreateReturnRequest, ReturnRecord

logger = logging.getLogger(__name__)

# --- Constants (can be overridden by parameters or config) ---
DEFAULT_BASE_URL = "http://localhost:8081/api/mobile"
DEFAULT_TIMEOUT_SECONDS = 15

_DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ReturnsApiClient:
    """Thin typed wrapper around the ``/returns``, ``/stores`` and ``/channels`` endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.AsyncSession] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session

    # ------------------------------------------------------------------ #
    # endpoints
    # ------------------------------------------------------------------ #

    async def fetch_returns(self, query: Query) -> Page[ReturnRecord]:
        """GET /returns for one page of ``query``."""
        data = await self._request("GET", "/returns", params=query.to_params())
        records = [ReturnRecord.from_api(doc) for doc in require_list(data, "return_mobiles")]
        pagination = require(data, "pagination", dict)
        total = require(pagination, "total", int)
        if total < 0:
            raise SchemaError(f"Negative total in pagination: {total}")
        return Page(
            items=records,
            total=total,
            page=require(pagination, "page", int),
            limit=require(pagination, "limit", int),
        )

    async def create_return(self, request: CreateReturnRequest) -> ReturnRecord:
        """POST /returns."""
        data = await self._request("POST", "/returns", body=request.to_api())
        return ReturnRecord.from_api(data)

    async def fetch_stores(self, search: str = "") -> List[Store]:
        """GET /stores, unfiltered unless ``search`` is given."""
        data = await self._request("GET", "/stores", params=_search_params(search))
        return [Store.from_api(doc) for doc in require_list(data, "stores")]

    async def fetch_channels(self, search: str = "") -> List[Channel]:
        """GET /channels, unfiltered unless ``search`` is given."""
        data = await self._request("GET", "/channels", params=_search_params(search))
        return [Channel.from_api(doc) for doc in require_list(data, "channels")]

    async def aclose(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    # ------------------------------------------------------------------ #
    # transport
    # ------------------------------------------------------------------ #

    def _get_session(self) -> requests.AsyncSession:
        if self._session is None:
            self._session = requests.AsyncSession(headers=dict(_DEFAULT_HEADERS))
        return self._session

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Perform one request and return the envelope's ``data`` member.

        Raises:
            NetworkError: no response was received
            HttpStatusError: the status code was not 2xx
            ApiError: the envelope reported ``success=false``
            SchemaError: the body was not a well-formed envelope
        """
        url = f"{self.base_url}{path}"
        session = self._get_session()
        logger.debug(f"{method} {url} params={params}")

        try:
            response = await session.request(
                method,
                url,
                params=params or None,
                json=body,
                headers=_DEFAULT_HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestsError as e:
            logger.warning(f"Request failed for {method} {url}: {e}")
            raise NetworkError(f"Request failed for {url}: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"{method} {url} returned status {response.status_code}")
            raise HttpStatusError(response.status_code)

        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"Could not decode JSON from {url}: {e}")
            raise SchemaError(f"Response from {url} is not valid JSON") from e

        return unwrap(payload)


def _search_params(search: str) -> Dict[str, Any]:
    return {"search": search} if search else {}
