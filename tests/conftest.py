"""Pytest configuration and fixtures.

This module provides fixtures for:
- An isolated SQLite database per test (migrated with the real schema code)
- Repository-level sessions
- HTTP clients against the FastAPI app, anonymous and signed in as admin
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from cms_admin.config import settings
from cms_admin.db import get_db
from cms_admin.main import app
from cms_admin.schema import ensure_schema

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse-battery"
ALLOWED_EMAIL = "owner@example.com"

PNG_DATA = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk"
GIF_DATA = "data:image/gif;base64,R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"


@pytest.fixture(autouse=True)
def admin_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Known admin credentials and the default position policy for every test."""
    monkeypatch.setattr(settings, "admin_username", ADMIN_USERNAME)
    monkeypatch.setattr(settings, "admin_password", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "admin_emails", ALLOWED_EMAIL)
    monkeypatch.setattr(settings, "renumber_on_delete", False)
    monkeypatch.setattr(settings, "atomic_swap", True)


@pytest.fixture
async def bare_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine on an empty database file; nothing created yet."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'cms.db'}")
    yield engine
    await engine.dispose()


@pytest.fixture
async def engine(bare_engine: AsyncEngine) -> AsyncEngine:
    """Engine on a fully migrated database."""
    async with bare_engine.begin() as conn:
        await ensure_schema(conn)
    return bare_engine


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def anon_client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Client without a session cookie."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_token(anon_client: AsyncClient) -> str:
    """Access token obtained through the credentials login."""
    response = await anon_client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.cookies["access_token"]


@pytest.fixture
async def client(anon_client: AsyncClient, admin_token: str) -> AsyncClient:
    """Client signed in as admin."""
    anon_client.cookies.set("access_token", admin_token)
    return anon_client
