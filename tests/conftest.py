"""
Shared test fixtures.

These replace real infrastructure with lightweight in-memory alternatives:
- PostgreSQL → SQLite in memory (via aiosqlite)
- Redis → fakeredis (pure Python Redis mock)
- HTTP server → httpx.AsyncClient with ASGI transport (no network)

This means tests:
- Run without Docker
- Run in milliseconds (no network, no disk)
- Are fully isolated (each test gets a fresh database)
"""

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from fakeredis.aioredis import FakeRedis

from models.base import Base
from api.main import create_app
from api.dependencies import get_db, get_redis

# SQLite in-memory database: created fresh for each test
TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(TEST_DB_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(async_engine):
    """Create a database session bound to the test engine."""
    factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def fake_redis():
    """Create a fake Redis instance (in-memory, no real Redis needed)."""
    r = FakeRedis()
    await r.flushall()
    yield r
    await r.flushall()


@pytest_asyncio.fixture
async def client(async_session, fake_redis):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides swaps the real get_db and get_redis for the
    in-memory versions. The response cache and the auth dependency are
    built on top of these, so they follow automatically.
    """
    app = create_app()

    async def override_get_db():
        yield async_session

    async def override_get_redis():
        return fake_redis

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = override_get_redis

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def register_user(client):
    """Returns a coroutine that registers a user and gives back its auth headers."""

    async def _register(username="alice", email="alice@example.com", password="password123"):
        response = await client.post("/api/auth/register", json={
            "username": username,
            "email": email,
            "password": password,
        })
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register


@pytest_asyncio.fixture
async def auth_headers(register_user):
    return await register_user()
