"""
sbdata_sandbox.db.models

Entity definitions for the sandbox schema.

Responsibilities:
- Map the three demo records onto their tables:
  - AccessLog: database-assigned integer key (null until inserted)
  - User: client-assigned string key, soft-delete timestamps
  - Article: client-assigned string key, plain `author_id` reference to a user
- Default `created_at` when the object is constructed, not in DDL.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sbdata_sandbox.db.base import Base
from sbdata_sandbox.db.persistable import ForceInsertMixin


def _now() -> datetime:
    return datetime.now(timezone.utc)


# SQLite only autoincrements a column declared exactly as INTEGER PRIMARY KEY.
_BigIntKey = BigInteger().with_variant(Integer, "sqlite")


class AccessLog(Base):
    __tablename__ = "access_logs"

    # None until the database assigns it on insert.
    id: Mapped[int] = mapped_column(_BigIntKey, primary_key=True, autoincrement=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __init__(
        self,
        *,
        message: str,
        id: int | None = None,
        created_at: datetime | None = None,
    ) -> None:
        super().__init__(message=message, created_at=created_at or _now())
        if id is not None:
            self.id = id


class User(ForceInsertMixin, Base):
    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column("id", String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __init__(
        self,
        *,
        user_id: str,
        name: str,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        deleted_at: datetime | None = None,
        force_insert_on_save: bool = False,
    ) -> None:
        super().__init__(
            user_id=user_id,
            name=name,
            created_at=created_at or _now(),
            updated_at=updated_at,
            deleted_at=deleted_at,
        )
        self.force_insert_on_save = force_insert_on_save

    def get_id(self) -> str:
        return self.user_id


class Article(ForceInsertMixin, Base):
    __tablename__ = "articles"

    article_id: Mapped[str] = mapped_column("id", String(64), primary_key=True)
    head: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    # Plain value column: the constraint lives in DDL, there is no relationship() to join on.
    author_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.id"), nullable=False, index=True
    )

    def __init__(
        self,
        *,
        article_id: str,
        author_id: str,
        head: str,
        description: str,
        published_at: datetime | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        deleted_at: datetime | None = None,
        force_insert_on_save: bool = False,
    ) -> None:
        super().__init__(
            article_id=article_id,
            author_id=author_id,
            head=head,
            description=description,
            published_at=published_at,
            created_at=created_at or _now(),
            updated_at=updated_at,
            deleted_at=deleted_at,
        )
        self.force_insert_on_save = force_insert_on_save

    def get_id(self) -> str:
        return self.article_id


# --- Module Notes -----------------------------------------------------------
# `force_insert_on_save` is set after `super().__init__` on purpose: the declarative
# constructor only accepts mapped attributes.
