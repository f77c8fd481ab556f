"""
sbdata_sandbox.db.repositories

Repository package.

Responsibilities:
- Group the per-entity repository facades built on `CrudRepo`.
"""

from sbdata_sandbox.db.repositories.access_logs import AccessLogRepo
from sbdata_sandbox.db.repositories.articles import ArticleRepo
from sbdata_sandbox.db.repositories.crud import CrudRepo, SaveAction
from sbdata_sandbox.db.repositories.users import UserRepo

__all__ = ["AccessLogRepo", "ArticleRepo", "CrudRepo", "SaveAction", "UserRepo"]


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; transaction boundaries belong to callers.
