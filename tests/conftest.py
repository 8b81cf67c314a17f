# tests/conftest.py
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from customer_registry.db import create_db_and_tables
from customer_registry.main import create_app

# Fresh in-memory database per test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def app():
    app = create_app(TEST_DATABASE_URL)
    await create_db_and_tables(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def session_factory(app):
    return app.state.session_factory


@pytest_asyncio.fixture
async def customer(client):
    """A stored customer without addresses"""
    resp = await client.post("/api/customers/", json={"name": "Linus Torvalds", "cpf": "73473943096"})
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def customer_with_addresses(client):
    resp = await client.post(
        "/api/customers/with-addresses",
        json={
            "name": "Bill Gates",
            "cpf": "95395994076",
            "addresses": [
                {"street": "Verão do Cometa", "city": "Elvira"},
                {"street": "Borba Gato", "city": "Perobia"},
            ],
        },
    )
    assert resp.status_code == 201
    return resp.json()
