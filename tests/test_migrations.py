"""
tests.test_migrations

Alembic revisions against a scratch SQLite database.

Responsibilities:
- `upgrade head` produces the same tables, columns and keys as `Base.metadata`.
- `downgrade base` removes every sandbox table again.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from sbdata_sandbox.db import models  # noqa: F401  # register tables on Base.metadata
from sbdata_sandbox.db.base import Base

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "migrated.db"
    monkeypatch.setenv("SBDATA_DATABASE_URL", f"sqlite+aiosqlite:///{path}")
    return path


def _alembic_config() -> Config:
    # No ini file: env.py then leaves the process logging configuration alone.
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    return config


def _schema(db_path: Path) -> dict[str, dict[str, object]]:
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        insp = inspect(engine)
        return {
            table: {
                "columns": {col["name"]: col["nullable"] for col in insp.get_columns(table)},
                "pk": set(insp.get_pk_constraint(table)["constrained_columns"]),
                "fks": {
                    (tuple(fk["constrained_columns"]), fk["referred_table"])
                    for fk in insp.get_foreign_keys(table)
                },
            }
            for table in insp.get_table_names()
            if table != "alembic_version"
        }
    finally:
        engine.dispose()


def _metadata_schema() -> dict[str, dict[str, object]]:
    return {
        name: {
            "columns": {col.name: col.nullable for col in table.columns},
            "pk": {col.name for col in table.primary_key.columns},
            "fks": {
                ((fk.parent.name,), fk.column.table.name) for fk in table.foreign_keys
            },
        }
        for name, table in Base.metadata.tables.items()
    }


def test_upgrade_head_matches_models(db_path: Path) -> None:
    command.upgrade(_alembic_config(), "head")
    assert _schema(db_path) == _metadata_schema()


def test_downgrade_base_drops_sandbox_tables(db_path: Path) -> None:
    config = _alembic_config()
    command.upgrade(config, "head")
    command.downgrade(config, "base")
    assert _schema(db_path) == {}


# --- Module Notes -----------------------------------------------------------
# Sync tests: alembic/env.py runs its own event loop with asyncio.run.
