from __future__ import annotations

from sbdata_sandbox.db.models import AccessLog
from sbdata_sandbox.db.repositories.crud import CrudRepo


class AccessLogRepo(CrudRepo[AccessLog, int]):
    # No Persistable: a None id is what makes an access log new.
    entity_type = AccessLog
