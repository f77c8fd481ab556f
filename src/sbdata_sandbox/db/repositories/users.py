from __future__ import annotations

from sbdata_sandbox.db.models import User
from sbdata_sandbox.db.repositories.crud import CrudRepo


class UserRepo(CrudRepo[User, str]):
    entity_type = User
