"""Concurrent API tests."""
import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from bookstore.main import create_app
from bookstore.services.store import BookStore


@pytest.mark.asyncio
async def test_concurrent_creates_over_http():
    store = BookStore()
    app = create_app(store=store)
    clients = 25
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        responses = await asyncio.gather(
            *(ac.post("/books", json={"title": f"T{i}", "author": "A", "price": i}) for i in range(clients))
        )
        assert all(r.status_code == 201 for r in responses)
        assert sorted(r.json()["id"] for r in responses) == list(range(1, clients + 1))

        listing = await ac.get("/books")
        assert len(listing.json()) == clients


@pytest.mark.asyncio
async def test_concurrent_updates_are_not_lost():
    store = BookStore()
    app = create_app(store=store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        await ac.post("/books", json={"title": "A", "author": "B", "price": 1.0})
        await asyncio.gather(
            ac.put("/books/1", json={"title": "A2"}),
            ac.put("/books/1", json={"author": "B2"}),
            ac.put("/books/1", json={"price": 2.0}),
        )
        book = (await ac.get("/books/1")).json()
        assert book == {"id": 1, "title": "A2", "author": "B2", "price": 2.0}
