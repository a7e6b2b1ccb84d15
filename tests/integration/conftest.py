"""Integration test fixtures for database and HTTP client operations.

Tests run against a SQLite file database; tables are created fresh for
every test. Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.tasktracker.core import db
from src.tasktracker.core.config import get_settings
from src.tasktracker.main import create_app
from tests.factories import DEFAULT_TEST_PASSWORD, UserFactory
from tests.helpers import auth_headers


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create test database engine with a fresh schema."""
    await db.dispose_engine()

    settings = get_settings()
    test_engine = create_async_engine(settings.database_url, poolclass=NullPool)

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    IMPORTANT: The AsyncSession context manager only closes the session on exit;
    it does NOT auto-commit. Tests must call `await session.commit()` before
    hitting the API, otherwise the SQLite write lock is still held.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


async def _create_test_user(db_session: AsyncSession, **kwargs) -> dict:
    user = UserFactory.build(**kwargs)
    db_session.add(user)
    await db_session.commit()
    return {
        "id": str(user.id),
        "email": user.email,
        "password": DEFAULT_TEST_PASSWORD,
        "user": user,
        "headers": auth_headers(user.id),
    }


@pytest.fixture
async def test_user(db_session: AsyncSession) -> dict:
    """Create the primary test user (owner of most test data)."""
    return await _create_test_user(db_session, full_name="Alice Owner")


@pytest.fixture
async def other_user(db_session: AsyncSession) -> dict:
    """Create a second user who owns nothing of the primary user's."""
    return await _create_test_user(db_session, full_name="Bob Outsider")


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Create test client bound to a fresh app instance."""
    await db.dispose_engine()

    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    await db.dispose_engine()
