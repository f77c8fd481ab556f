"""
tests.conftest

Shared fixtures for the sandbox test suite.

Responsibilities:
- Provide a fresh file-backed SQLite database (with tables) per test.
- Provide a helper that counts committed rows from a separate transaction.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sbdata_sandbox.db.init_db import drop_db, init_db
from sbdata_sandbox.db.repositories import AccessLogRepo, ArticleRepo, UserRepo
from sbdata_sandbox.db.session import create_engine, create_sessionmaker, transaction_scope
from sbdata_sandbox.settings import Settings

RowCounts = Callable[[], Awaitable[dict[str, int]]]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'sandbox.db'}")


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await init_db(engine)
    yield engine
    await drop_db(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest.fixture
def row_counts(session_factory: async_sessionmaker[AsyncSession]) -> RowCounts:
    # Counts run in their own transaction, so they only see committed rows.
    async def _counts() -> dict[str, int]:
        async with transaction_scope(session_factory) as session:
            return {
                "access_logs": await AccessLogRepo(session).count(),
                "users": await UserRepo(session).count(),
                "articles": await ArticleRepo(session).count(),
            }

    return _counts


# --- Module Notes -----------------------------------------------------------
# A file (not :memory:) database is used so every session sees the same data.
