"""
sbdata_sandbox.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the sandbox.
- Offer a cached settings instance for the CLI runner.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `SBDATA_`):
    - Defaults target a local SQLite file
    - `env` decides whether tables are created on startup
    """

    model_config = SettingsConfigDict(env_prefix="SBDATA_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "sbdata-sandbox"
    log_level: str = "INFO"
    log_json: bool = True

    # Persistence
    # URLs may embed credentials; keep them out of repr/logging.
    database_url: str = Field(default="sqlite+aiosqlite:///./sbdata.db", repr=False)
    # Echo emitted SQL (BEGIN/INSERT/UPDATE/COMMIT) to observe transaction timing.
    echo_sql: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Point `SBDATA_DATABASE_URL` at `postgresql+asyncpg://...` to run the examples
# against PostgreSQL (install the `postgres` extra).
