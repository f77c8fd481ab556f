"""
alembic.env

Alembic migration environment configuration.

Responsibilities:
- Provide metadata discovery for autogeneration.
- Configure offline/online migration execution against the async engine URL.

Notes:
- This module is executed by Alembic, not imported by the sandbox runtime.
"""

from __future__ import annotations

import asyncio
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from sbdata_sandbox.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from sbdata_sandbox.db.base import Base
from sbdata_sandbox.settings import Settings


config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _get_database_url() -> str:
    # Prefer explicit env var for migrations
    if "SBDATA_DATABASE_URL" in os.environ:
        return os.environ["SBDATA_DATABASE_URL"]
    return Settings().database_url


def run_migrations_offline() -> None:
    # Offline: emit SQL scripts without a DB connection.
    context.configure(
        url=_get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    # Online: the configured URL uses an async driver, so drive Alembic through run_sync.
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = _get_database_url()
    connectable = async_engine_from_config(
        configuration, prefix="sqlalchemy.", poolclass=pool.NullPool
    )

    async with connectable.connect() as connection:
        await connection.run_sync(_run_migrations)
    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())


# --- Module Notes -----------------------------------------------------------
# Keep this file aligned with SQLAlchemy metadata definitions in `sbdata_sandbox.db.models`.
