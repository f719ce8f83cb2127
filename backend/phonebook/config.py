"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The MongoDB connection string comes from MONGODB_URI only (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - A missing MONGODB_URI is not a load error here; startup refuses to bind
      (see infrastructure/database.open_mongo)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for everything else: works out-of-the-box against a local mongod
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # MongoDB
    mongodb_uri: str | None = None
    mongodb_database: str = "phonebook"
    mongodb_collection: str = "persons"
    mongodb_timeout_ms: int = 5000

    @field_validator("mongodb_uri", mode="before")
    @classmethod
    def blank_uri_is_missing(cls, v: str | None) -> str | None:
        """MONGODB_URI= in a .env file counts as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]
    static_dir: str = "dist"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
