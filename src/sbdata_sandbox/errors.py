"""
sbdata_sandbox.errors

Exception hierarchy for the sandbox.

Responsibilities:
- Give callers library-independent failure types for repository operations.
- Keep the original driver/ORM exception reachable via `__cause__`.
"""

from __future__ import annotations

from typing import Any


class SandboxError(Exception):
    pass


class PersistenceError(SandboxError):
    """A repository statement failed."""


class ConstraintViolationError(PersistenceError):
    """Duplicate key, missing foreign key target, NOT NULL violation, ..."""

    def __init__(self, table: str, detail: str) -> None:
        super().__init__(f"constraint violation on {table}: {detail}")
        self.table = table
        self.detail = detail


class IncorrectUpdateError(PersistenceError):
    """An UPDATE was issued for an entity whose row does not exist."""

    def __init__(self, table: str, entity_id: Any) -> None:
        super().__init__(f"failed to update {table} row: id {entity_id!r} not found")
        self.table = table
        self.entity_id = entity_id


class DemoFailure(SandboxError):
    """Deliberate failure used to demonstrate rollback."""


# --- Module Notes -----------------------------------------------------------
# A find that matches nothing returns None; it is never an error.
