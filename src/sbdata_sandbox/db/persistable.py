"""
sbdata_sandbox.db.persistable

Insert/update dispatch capability for entities with client-assigned keys.

Responsibilities:
- Define the `Persistable` protocol consulted by `CrudRepo.save`.
- Provide `ForceInsertMixin`, which answers `is_new()` from a transient flag.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from sqlalchemy import orm


@runtime_checkable
class Persistable(Protocol):
    """
    Entities implementing this decide for themselves whether `save` inserts.
    Entities without it are new exactly when their primary key is None.
    """

    def is_new(self) -> bool: ...

    def get_id(self) -> Any: ...


class ForceInsertMixin:
    """
    Adds the transient `force_insert_on_save` flag.

    The flag is a plain instance attribute, so it never appears in INSERT,
    UPDATE or SELECT column lists. Rows loaded from the database go through
    `_reset_force_insert` instead of `__init__` and always start with it False.
    """

    force_insert_on_save = False

    @orm.reconstructor
    def _reset_force_insert(self) -> None:
        self.force_insert_on_save = False

    def is_new(self) -> bool:
        return bool(self.force_insert_on_save)


# --- Module Notes -----------------------------------------------------------
# A populated key alone cannot tell an insert from an update; the caller sets the
# flag explicitly when the row is known not to exist yet.
