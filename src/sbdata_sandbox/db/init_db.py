"""
sbdata_sandbox.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create and drop the sandbox tables for local development and tests.
- Keep production migration workflow separate (Alembic).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from sbdata_sandbox.db import models  # noqa: F401  # register tables on Base.metadata
from sbdata_sandbox.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production should run `alembic upgrade head` instead.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# --- Module Notes -----------------------------------------------------------
# create_all orders tables by foreign keys, so `users` is created before `articles`.
