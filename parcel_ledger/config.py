"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - Defaults work out of the box: SQLite file database, duplicate names rejected

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - PARCEL_ env prefix keeps ledger settings apart from other services on the host
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from parcel_ledger.core.domain_types import StorageBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="PARCEL_", case_sensitive=False,
    )

    # Storage
    storage_backend: StorageBackend = StorageBackend.DATABASE
    database_url: str = "sqlite+aiosqlite:///./parcel_ledger.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Alembic owns the schema in production; create_all is for local runs
    database_create_tables: bool = True

    # Ledger policy
    reject_duplicate_holder_names: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
