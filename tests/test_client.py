from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator

import pytest
from aiohttp import test_utils

from pylistserver.client import ListClient
from pylistserver.config import ListServerConfig
from pylistserver.exceptions import ListServerError, ListTransportError
from pylistserver.interaction import move_item, toggle_selection
from pylistserver.server import create_app
from pylistserver.state.policy import HasMorePolicy
from pylistserver.state.store import ListStore


@contextlib.asynccontextmanager
async def _client(store: ListStore) -> AsyncIterator[ListClient]:
    app = create_app(store, config=ListServerConfig())
    async with test_utils.TestServer(app) as server:
        async with ListClient(f"http://{server.host}:{server.port}/") as client:
            yield client


@pytest.mark.asyncio
async def test_get_items_and_initial_state() -> None:
    async with _client(ListStore(size=50)) as client:
        page = await client.get_items(offset=10, limit=5)
        state = await client.get_initial_state()

    assert [item.id for item in page.items] == [11, 12, 13, 14, 15]
    assert page.items[0].value == "Элемент №11"
    assert page.has_more is True
    assert len(state.items) == 20
    assert state.selected_ids == []


@pytest.mark.asyncio
async def test_iter_items_walks_every_page() -> None:
    async with _client(ListStore(size=45)) as client:
        ids = [item.id async for item in client.iter_items(page_size=20)]

    assert ids == list(range(1, 46))


@pytest.mark.asyncio
async def test_iter_items_with_query() -> None:
    async with _client(ListStore(size=120)) as client:
        ids = [item.id async for item in client.iter_items("№11", page_size=3)]

    assert ids == [11, 110, 111, 112, 113, 114, 115, 116, 117, 118, 119]


@pytest.mark.asyncio
async def test_iter_items_terminates_under_legacy_policy() -> None:
    store = ListStore(size=40, has_more_policy=HasMorePolicy.LEGACY)
    async with _client(store) as client:
        ids = [item.id async for item in client.iter_items(page_size=20)]

    # The legacy flag stays true after the last page; the empty page ends iteration.
    assert ids == list(range(1, 41))


@pytest.mark.asyncio
async def test_drag_and_drop_reorder_is_persisted() -> None:
    store = ListStore(size=6)
    async with _client(store) as client:
        state = await client.get_initial_state()
        ids = move_item([item.id for item in state.items], 0, 3)
        await client.save_order(ids)
        page = await client.get_items(limit=6)

    assert ids == [2, 3, 4, 1, 5, 6]
    assert [item.id for item in page.items] == ids


@pytest.mark.asyncio
async def test_toggle_selection_is_persisted() -> None:
    store = ListStore(size=6)
    async with _client(store) as client:
        selected = toggle_selection(set(), 4)
        selected = toggle_selection(selected, 2)
        selected = toggle_selection(selected, 4)
        await client.save_selection(selected)
        state = await client.get_initial_state()

    assert state.selected_ids == [2]


@pytest.mark.asyncio
async def test_rejected_order_raises_transport_error() -> None:
    async with _client(ListStore(size=6)) as client:
        with pytest.raises(ListTransportError) as excinfo:
            await client.save_order([1, 2])

    assert excinfo.value.status_code == 400
    assert excinfo.value.endpoint == "/api/sort"


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error() -> None:
    async with ListClient("http://127.0.0.1:1") as client:
        with pytest.raises(ListTransportError) as excinfo:
            await client.get_items()

    assert excinfo.value.status_code is None


@pytest.mark.asyncio
async def test_client_requires_context_manager() -> None:
    client = ListClient("http://127.0.0.1:3000")

    with pytest.raises(ListServerError):
        await client.get_initial_state()


@pytest.mark.asyncio
async def test_iter_items_over_lax_order_with_unknown_ids() -> None:
    store = ListStore(size=3, strict=False)
    store.replace_order([1, 99, 2, 3])
    async with _client(store) as client:
        ids = [item.id async for item in client.iter_items(page_size=2)]

    assert ids == [1, 2, 3]
