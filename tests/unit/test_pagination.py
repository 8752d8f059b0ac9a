import asyncio

import pytest

from api.errors import ApiError
from api.models import Page, Pagination
from listing.pagination import PaginatedList
from tests.helpers import DummyLogger


class FakeBackend:
    """Serves ``total`` numbered rows, honouring page, limit and a ``parity`` filter."""

    def __init__(self, total=45):
        self.rows = list(range(1, total + 1))
        self.calls = []
        self.gates = {}
        self.fail = False

    async def fetch(self, page, limit, filters):
        self.calls.append((page, limit, dict(filters)))
        gate = self.gates.get(page)
        if gate is not None:
            await gate.wait()
        if self.fail:
            raise ApiError("boom", status_code=500)
        rows = self.rows
        if filters.get("parity") == "even":
            rows = [row for row in rows if row % 2 == 0]
        total_pages = max(1, -(-len(rows) // limit))
        start = (page - 1) * limit
        return Page(
            items=rows[start:start + limit],
            pagination=Pagination(total=len(rows), page=page, limit=limit, total_pages=total_pages),
        )


@pytest.mark.asyncio
async def test_refresh_loads_first_page():
    backend = FakeBackend()
    listing = PaginatedList(backend.fetch, limit=20, logger=DummyLogger())

    assert await listing.refresh() is True

    assert listing.items == list(range(1, 21))
    assert listing.state.total == 45
    assert listing.state.total_pages == 3
    assert listing.state.has_next and not listing.state.has_previous


@pytest.mark.asyncio
async def test_paging_refetches_from_server():
    backend = FakeBackend()
    listing = PaginatedList(backend.fetch, limit=20, logger=DummyLogger())
    await listing.refresh()

    await listing.next_page()
    await listing.next_page()
    assert listing.items == list(range(41, 46))
    assert await listing.next_page() is False

    await listing.previous_page()
    assert listing.state.page == 2
    assert [call[0] for call in backend.calls] == [1, 2, 3, 2]


@pytest.mark.asyncio
async def test_filter_change_resets_to_first_page():
    backend = FakeBackend()
    listing = PaginatedList(backend.fetch, limit=10, logger=DummyLogger())
    await listing.refresh()
    await listing.go_to(4)

    await listing.set_filters(parity="even")

    assert listing.state.page == 1
    assert listing.filters == {"parity": "even"}
    assert listing.items == [2, 4, 6, 8, 10, 12, 14, 16, 18, 20]

    await listing.set_filters(parity=None)
    assert listing.filters == {}


@pytest.mark.asyncio
async def test_mutation_triggers_refetch_and_clamps_page():
    backend = FakeBackend(total=21)
    listing = PaginatedList(backend.fetch, limit=10, logger=DummyLogger())
    await listing.refresh()
    await listing.go_to(3)
    assert listing.items == [21]

    async def delete_last():
        backend.rows.remove(21)
        return "deleted"

    outcome = await listing.mutate(delete_last)

    assert outcome == "deleted"
    assert listing.state.page == 2
    assert listing.items == list(range(11, 21))


@pytest.mark.asyncio
async def test_stale_page_response_is_dropped():
    backend = FakeBackend()
    backend.gates = {1: asyncio.Event(), 2: asyncio.Event()}
    listing = PaginatedList(backend.fetch, limit=20, logger=DummyLogger())
    listing.state.total_pages = 3

    first = asyncio.create_task(listing.go_to(1))
    await asyncio.sleep(0)
    second = asyncio.create_task(listing.go_to(2))
    await asyncio.sleep(0)

    backend.gates[2].set()
    assert await second is True
    backend.gates[1].set()
    assert await first is False

    assert listing.state.page == 2
    assert listing.items == list(range(21, 41))


@pytest.mark.asyncio
async def test_fetch_failure_keeps_error_message():
    backend = FakeBackend()
    backend.fail = True
    listing = PaginatedList(backend.fetch, logger=DummyLogger())

    assert await listing.refresh() is False
    assert listing.error == "boom"
    assert listing.items == []
    assert listing.loading is False
