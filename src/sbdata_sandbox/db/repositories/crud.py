"""
sbdata_sandbox.db.repositories.crud

Generic CRUD repository over one mapped entity type.

Responsibilities:
- Decide per `save` whether to INSERT or UPDATE (`SaveAction`).
- Translate integrity failures into `ConstraintViolationError`.
- Hand out detached entities so no identity map outlives a call.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Column, Table, delete, exists, func, inspect, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapper, make_transient

from sbdata_sandbox.db.base import Base
from sbdata_sandbox.db.persistable import Persistable
from sbdata_sandbox.errors import ConstraintViolationError, IncorrectUpdateError
from sbdata_sandbox.observability.logging import get_logger

EntityT = TypeVar("EntityT", bound=Base)
IdT = TypeVar("IdT")

log = get_logger(__name__)


class SaveAction(enum.StrEnum):
    insert = "INSERT"
    update = "UPDATE"


class CrudRepo(Generic[EntityT, IdT]):
    """
    Statements run on the caller's session; commit/rollback belong to
    `transaction_scope`, never to the repository.
    """

    entity_type: ClassVar[type[Base]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    # -- mapping helpers ------------------------------------------------------

    @property
    def _mapper(self) -> Mapper[Any]:
        return inspect(self.entity_type)

    @property
    def _table(self) -> Table:
        return self.entity_type.__table__  # type: ignore[return-value]

    @property
    def _pk_column(self) -> Column[Any]:
        return self._mapper.primary_key[0]

    @property
    def _pk_attr(self) -> str:
        return self._mapper.get_property_by_column(self._pk_column).key

    def _id_of(self, entity: EntityT) -> Any:
        return getattr(entity, self._pk_attr)

    # -- save -----------------------------------------------------------------

    def save_action(self, entity: EntityT) -> SaveAction:
        if isinstance(entity, Persistable):
            return SaveAction.insert if entity.is_new() else SaveAction.update
        return SaveAction.insert if self._id_of(entity) is None else SaveAction.update

    async def save(self, entity: EntityT) -> EntityT:
        action = self.save_action(entity)
        if action is SaveAction.insert:
            await self._insert(entity)
        else:
            await self._update(entity)
        log.debug(
            "entity.saved", table=self._table.name, action=str(action), id=self._id_of(entity)
        )
        return entity

    async def save_all(self, entities: Iterable[EntityT]) -> list[EntityT]:
        return [await self.save(entity) for entity in entities]

    async def _insert(self, entity: EntityT) -> None:
        # A previously saved or loaded instance would otherwise be re-attached as
        # persistent, and flushing it would never emit an INSERT.
        if inspect(entity).has_identity:
            make_transient(entity)
        self._session.add(entity)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise ConstraintViolationError(self._table.name, str(exc.orig)) from exc
        self._session.expunge(entity)

    async def _update(self, entity: EntityT) -> None:
        entity_id = self._id_of(entity)
        values = {
            attr.columns[0].name: getattr(entity, attr.key)
            for attr in self._mapper.column_attrs
            if attr.columns[0] is not self._pk_column
        }
        stmt = update(self._table).where(self._pk_column == entity_id).values(values)
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            raise ConstraintViolationError(self._table.name, str(exc.orig)) from exc
        if result.rowcount == 0:
            raise IncorrectUpdateError(self._table.name, entity_id)

    # -- find -----------------------------------------------------------------

    async def find_by_id(self, entity_id: IdT) -> EntityT | None:
        entity = await self._session.get(self.entity_type, entity_id)
        if entity is None:
            return None
        self._session.expunge(entity)
        return entity  # type: ignore[return-value]

    async def exists_by_id(self, entity_id: IdT) -> bool:
        stmt = select(exists().where(self._pk_column == entity_id))
        return bool((await self._session.execute(stmt)).scalar())

    async def find_all(self) -> list[EntityT]:
        stmt = select(self.entity_type).order_by(self._pk_column)
        return await self._detached(stmt)

    async def find_all_by_id(self, entity_ids: Iterable[IdT]) -> list[EntityT]:
        ids = list(entity_ids)
        if not ids:
            return []
        stmt = select(self.entity_type).where(self._pk_column.in_(ids)).order_by(self._pk_column)
        return await self._detached(stmt)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self._table)
        return int((await self._session.execute(stmt)).scalar_one())

    async def _detached(self, stmt: Any) -> list[EntityT]:
        entities: Sequence[Any] = (await self._session.execute(stmt)).scalars().all()
        for entity in entities:
            self._session.expunge(entity)
        return list(entities)

    # -- delete ---------------------------------------------------------------

    async def delete_by_id(self, entity_id: IdT) -> None:
        # Deleting a missing row is a no-op.
        await self._session.execute(delete(self._table).where(self._pk_column == entity_id))

    async def delete(self, entity: EntityT) -> None:
        await self.delete_by_id(self._id_of(entity))

    async def delete_all_by_id(self, entity_ids: Iterable[IdT]) -> None:
        ids = list(entity_ids)
        if ids:
            await self._session.execute(delete(self._table).where(self._pk_column.in_(ids)))

    async def delete_all(self) -> None:
        result = await self._session.execute(delete(self._table))
        log.debug("entity.deleted_all", table=self._table.name, rows=result.rowcount)


# --- Module Notes -----------------------------------------------------------
# UPDATE always writes every non-key column, so an entity built from scratch with
# an existing key fully replaces the stored row.
