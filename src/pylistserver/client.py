"""High-level async client for the list API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable, Mapping
from typing import Any

import aiohttp

from pylistserver._constants import (
    DEFAULT_PAGE_SIZE,
    INITIAL_STATE_PATH,
    ITEMS_PATH,
    SELECT_PATH,
    SORT_PATH,
)
from pylistserver._logsafe import summarize_for_log
from pylistserver.exceptions import ListServerError, ListTransportError
from pylistserver.models.item import InitialState, Item, ItemsPage

_logger = logging.getLogger(__name__)


class ListClient:
    """Async client for the list API.

    Usage::

        async with ListClient("http://localhost:3000") as client:
            state = await client.get_initial_state()
            async for item in client.iter_items(query="№5000"):
                ...
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._external_session = session is not None
        self._http_session = session

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ListClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_session(self) -> aiohttp.ClientSession:
        if self._http_session is None:
            raise ListServerError("Client not initialized. Use 'async with ListClient(...) as client:'")
        return self._http_session

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> str:
        session = self._require_session()
        url = f"{self._base_url}{endpoint}"
        _logger.debug("%s %s params=%s body=%s", method, endpoint, params, summarize_for_log(json_body))
        try:
            async with session.request(method, url, params=params, json=json_body) as response:
                text = await response.text()
                if response.status >= 400:
                    raise ListTransportError(
                        f"{method} {endpoint} failed with HTTP {response.status}: {text}",
                        status_code=response.status,
                        endpoint=endpoint,
                    )
                return text
        except aiohttp.ClientError as exc:
            raise ListTransportError(f"{method} {endpoint} failed: {exc}", endpoint=endpoint) from exc

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def get_initial_state(self) -> InitialState:
        """Fetch the first page of the current order and the selection."""
        text = await self._request("GET", INITIAL_STATE_PATH)
        return InitialState.model_validate_json(text)

    async def get_items(
        self,
        offset: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        query: str = "",
    ) -> ItemsPage:
        """Fetch one page, searched by *query* when it is non-empty."""
        params = {"offset": str(offset), "limit": str(limit), "query": query}
        text = await self._request("GET", ITEMS_PATH, params=params)
        return ItemsPage.model_validate_json(text)

    async def save_order(self, ids: Iterable[int]) -> None:
        """Replace the server-side display order."""
        await self._request("POST", SORT_PATH, json_body={"newSortedIds": list(ids)})

    async def save_selection(self, ids: Iterable[int]) -> None:
        """Replace the server-side selection."""
        await self._request("POST", SELECT_PATH, json_body={"ids": list(ids)})

    async def iter_items(
        self,
        query: str = "",
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> AsyncIterator[Item]:
        """Yield items page by page, the way an infinitely-scrolling list loads them.

        A running offset advances by ``page_size``, the width of the slice the
        server pages over, even when unknown ids shorten a page.  Iteration
        stops once the server reports no more items or returns an empty page.
        """
        offset = 0
        while True:
            page = await self.get_items(offset, page_size, query)
            for item in page.items:
                yield item
            offset += page_size
            if not page.has_more or not page.items:
                return
