"""aiohttp application exposing the list store over HTTP."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from aiohttp import web
from pydantic import ValidationError

from pylistserver._constants import (
    INITIAL_STATE_PATH,
    INVALID_DATA_TEXT,
    ITEMS_PATH,
    SELECT_PATH,
    SELECTION_SAVED_TEXT,
    SORT_PATH,
    SORT_SAVED_TEXT,
)
from pylistserver._logsafe import summarize_for_log
from pylistserver.config import ListServerConfig
from pylistserver.exceptions import ListValidationError
from pylistserver.models._base import ApiModel
from pylistserver.models.requests import ListItemsQuery, SaveOrderRequest, SaveSelectionRequest
from pylistserver.state.store import ListStore

_logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ApiModel)
Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]

STORE_KEY = web.AppKey("store", ListStore)
CONFIG_KEY = web.AppKey("config", ListServerConfig)

# A full reorder carries every id; leave room for that in request bodies.
_BODY_BYTES_PER_ID = 16
_MIN_BODY_SIZE = 1024**2

_CORS_ALLOW_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


def _cors_headers(request: web.Request) -> dict[str, str]:
    headers = {"Access-Control-Allow-Origin": "*"}
    if request.method == "OPTIONS":
        headers["Access-Control-Allow-Methods"] = _CORS_ALLOW_METHODS
        requested = request.headers.get("Access-Control-Request-Headers")
        if requested:
            headers["Access-Control-Allow-Headers"] = requested
            headers["Vary"] = "Access-Control-Request-Headers"
    return headers


@web.middleware
async def cors_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Allow every origin; answer preflight requests without routing."""
    if request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers:
        response: web.StreamResponse = web.Response(status=204)
    else:
        try:
            response = await handler(request)
        except web.HTTPException as exc:
            exc.headers.update(_cors_headers(request))
            raise
    response.headers.update(_cors_headers(request))
    return response


def _json_response(model: ApiModel) -> web.Response:
    return web.Response(text=model.to_json(), content_type="application/json")


def _bad_request(text: str) -> web.HTTPBadRequest:
    return web.HTTPBadRequest(text=text)


async def _read_body(request: web.Request, model: type[M]) -> M:
    """Decode a JSON object body into *model*, or fail with a plain-text 400."""
    payload: Any = {}
    if request.can_read_body:
        try:
            payload = await request.json()
        except ValueError as exc:
            _logger.debug("Rejected %s: body is not JSON", request.path)
            raise _bad_request(INVALID_DATA_TEXT) from exc
    if not isinstance(payload, dict):
        raise _bad_request(INVALID_DATA_TEXT)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        _logger.debug("Rejected %s: %s", request.path, summarize_for_log(payload))
        raise _bad_request(INVALID_DATA_TEXT) from exc


# ------------------------------------------------------------------
# Handlers
# ------------------------------------------------------------------


async def list_items(request: web.Request) -> web.Response:
    """GET /api/items?offset=&limit=&query="""
    store = request.app[STORE_KEY]
    params = ListItemsQuery.model_validate(dict(request.query))
    page = store.list_items(params.offset, params.limit, params.query)
    _logger.debug(
        "Listed offset=%s limit=%s query=%r -> %d items (has_more=%s)",
        params.offset,
        params.limit,
        params.query,
        len(page.items),
        page.has_more,
    )
    return _json_response(page)


async def save_order(request: web.Request) -> web.Response:
    """POST /api/sort with ``{"newSortedIds": [...]}``."""
    store = request.app[STORE_KEY]
    body = await _read_body(request, SaveOrderRequest)
    if body.new_sorted_ids is None:
        raise _bad_request(INVALID_DATA_TEXT)
    _logger.debug("Saving order %s", summarize_for_log(body.new_sorted_ids))
    try:
        store.replace_order(body.new_sorted_ids)
    except ListValidationError as exc:
        _logger.debug("Order rejected: %s", exc)
        raise _bad_request(str(exc)) from exc
    return web.Response(text=SORT_SAVED_TEXT)


async def save_selection(request: web.Request) -> web.Response:
    """POST /api/select with ``{"ids": [...]}``."""
    store = request.app[STORE_KEY]
    body = await _read_body(request, SaveSelectionRequest)
    _logger.debug("Saving selection %s", summarize_for_log(body.ids))
    try:
        store.replace_selection(body.ids)
    except ListValidationError as exc:
        _logger.debug("Selection rejected: %s", exc)
        raise _bad_request(str(exc)) from exc
    return web.Response(text=SELECTION_SAVED_TEXT)


async def initial_state(request: web.Request) -> web.Response:
    """GET /api/initial-state"""
    store = request.app[STORE_KEY]
    config = request.app[CONFIG_KEY]
    return _json_response(store.initial_state(config.initial_page_size))


# ------------------------------------------------------------------
# Application factory
# ------------------------------------------------------------------


def create_app(
    store: ListStore | None = None,
    *,
    config: ListServerConfig | None = None,
) -> web.Application:
    """Build the aiohttp application.

    Parameters
    ----------
    store : ListStore or None
        State served by the handlers.  Built from *config* when omitted.
    config : ListServerConfig or None
        Server configuration.  Defaults to :class:`ListServerConfig` defaults.
    """
    if config is None:
        config = ListServerConfig()
    if store is None:
        store = ListStore.from_config(config)

    app = web.Application(
        middlewares=[cors_middleware],
        client_max_size=max(_MIN_BODY_SIZE, store.size * _BODY_BYTES_PER_ID),
    )
    app[STORE_KEY] = store
    app[CONFIG_KEY] = config
    app.router.add_get(ITEMS_PATH, list_items)
    app.router.add_post(SORT_PATH, save_order)
    app.router.add_post(SELECT_PATH, save_selection)
    app.router.add_get(INITIAL_STATE_PATH, initial_state)
    return app


def run(config: ListServerConfig) -> None:
    """Build the store and serve until interrupted."""
    app = create_app(config=config)
    _logger.info("Serving list API on http://%s:%d", config.host, config.port)
    web.run_app(app, host=config.host, port=config.port, print=None)
