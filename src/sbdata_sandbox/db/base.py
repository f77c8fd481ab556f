"""
sbdata_sandbox.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase for all ORM models.
- Render entities as `Name(field=value, ...)` for demo output and logs.
"""

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    def __repr__(self) -> str:
        # Only mapped columns; transient attributes are not part of the row.
        fields = ", ".join(
            f"{attr.key}={self.__dict__.get(attr.key)!r}"
            for attr in inspect(type(self)).column_attrs
        )
        return f"{type(self).__name__}({fields})"


# --- Module Notes -----------------------------------------------------------
# All ORM models should inherit from `Base` so Alembic and metadata discovery work.
