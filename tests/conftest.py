"""Pytest configuration and shared fixtures.

Unit tests run against in-memory fakes (tests/fakes.py). Integration tests
run against real libraries and a throwaway SQLite database per test.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from lifelog_auth.infrastructure.persistence.database import Database
from lifelog_auth.infrastructure.security.token_codec import TokenCodec
from tests.fakes import (
    T0,
    InMemoryRefreshTokenStore,
    InMemoryUserRepository,
    MutableClock,
    RecordingLogger,
)


@pytest.fixture
def clock() -> MutableClock:
    """Clock pinned at T0; tests advance it explicitly."""
    return MutableClock(T0)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec()


@pytest.fixture
def token_store() -> InMemoryRefreshTokenStore:
    return InMemoryRefreshTokenStore()


@pytest.fixture
def user_repo(clock: MutableClock) -> InMemoryUserRepository:
    return InMemoryUserRepository(clock)


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """File-backed SQLite database with all tables created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'lifelog_auth.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.get_session() as session:
        yield session
