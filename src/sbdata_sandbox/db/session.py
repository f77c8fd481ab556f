"""
sbdata_sandbox.db.session

Async SQLAlchemy engine, session factory and transaction scope.

Responsibilities:
- Create the async engine from settings (SQLite connections enforce foreign keys).
- Create the async sessionmaker with safe defaults.
- Provide `transaction_scope`, the explicit begin/commit/rollback boundary.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from sbdata_sandbox.observability.logging import get_logger
from sbdata_sandbox.settings import Settings

log = get_logger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    engine = create_async_engine(
        settings.database_url,
        pool_pre_ping=True,
        echo=settings.echo_sql,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
    # SQLite ignores REFERENCES clauses unless this is set per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps returned entities readable after the scope ends.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def transaction_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    One session, one transaction.

    - Leaving the block normally (including an early `return` from the caller)
      commits once, after every statement issued inside it.
    - An exception raised inside the block rolls everything back and is re-raised.
    """

    # bound_contextvars restores an enclosing scope's tx_id on exit.
    with structlog.contextvars.bound_contextvars(tx_id=uuid.uuid4().hex[:12]):
        log.info("transaction.begin")
        try:
            async with session_factory() as session:
                async with session.begin():
                    yield session
        except BaseException as exc:
            log.info("transaction.rollback", error=type(exc).__name__)
            raise
        else:
            log.info("transaction.commit")


# --- Module Notes -----------------------------------------------------------
# Nested scopes are independent transactions on separate connections; there is no
# propagation of an outer transaction into an inner one.
