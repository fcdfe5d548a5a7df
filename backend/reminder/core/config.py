"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the reminder backend.

    DB_CREDS and SECRET_KEY have no defaults: a process started without them
    fails while building its settings, before any route is served.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    DB_CREDS: str = Field(..., min_length=1)
    SECRET_KEY: str = Field(..., min_length=1)
    CERTIFICATE: Optional[str] = None

    JWT_ALGORITHM: str = "HS256"
    JWT_TOKEN_EXPIRE_DAYS: int = 365

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_RECYCLE_SECONDS: int = 180

    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    @model_validator(mode="after")
    def certificate_required_for_remote_db(self) -> "Settings":
        if not self.uses_sqlite() and not self.CERTIFICATE:
            raise ValueError("CERTIFICATE must be set for non-SQLite databases")
        return self

    def uses_sqlite(self) -> bool:
        return self.DB_CREDS.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()
