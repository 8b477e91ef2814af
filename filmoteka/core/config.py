# filmoteka/core/config.py
from __future__ import annotations

"""
# Filmoteka · Centralized Configuration (Pydantic v2)

Single `settings` object with strongly-typed, environment-driven config.

## Goals
- Safe defaults for local/dev so imports never crash.
- One place for the session TTL and cookie policy shared by auth and delivery.
- DSN assembly for PostgreSQL, with an override for any SQLAlchemy async URL.

## Usage
    from filmoteka.core.config import settings
"""

import logging
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)
load_dotenv()  # harmless in prod; convenient in dev


# ─────────────────────────────────────────────────────────────
# Small helpers
# ─────────────────────────────────────────────────────────────
def _split_csv(v: str | None) -> list[str]:
    """Split a comma-separated string into a trimmed list (empty-safe)."""
    if not v:
        return []
    return [s.strip() for s in str(v).split(",") if s and s.strip()]


# ─────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────
class Settings(BaseSettings):
    """
    Global application settings sourced from environment.

    Sessions:
        - `SESSION_TTL_SECONDS` is fixed at 24h unless overridden.
        - Cookie name/flags are shared by login, register and logout.

    Notes:
        - `DATABASE_URL_OVERRIDE` wins over the POSTGRES_* parts (handy for
          SQLite in local runs: `sqlite+aiosqlite:///./filmoteka.db`).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # don't crash on unknown keys
    )

    # ── App meta ──────────────────────────────────────────────
    PROJECT_NAME: str = "Filmoteka API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    ENABLE_DOCS: bool = True

    # ── Database (PostgreSQL) ─────────────────────────────────
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: SecretStr = SecretStr("postgres")
    POSTGRES_DB: str = "filmoteka"
    DATABASE_URL_OVERRIDE: Optional[str] = None
    DB_ECHO: bool = False

    # ── Redis / Sessions ──────────────────────────────────────
    REDIS_URL: str = "redis://localhost:6379/0"
    SESSION_TTL_SECONDS: int = Field(24 * 60 * 60, ge=60, le=30 * 24 * 60 * 60)
    SESSION_KEY_PREFIX: str = "session:"
    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_COOKIE_SECURE: bool = False
    SESSION_COOKIE_SAMESITE: Literal["lax", "strict", "none"] = "lax"

    # ── Passwords ─────────────────────────────────────────────
    PASSWORD_HASH_SCHEMES: List[str] = Field(default_factory=lambda: ["pbkdf2_sha256"])

    # ── Validators / normalizers ──────────────────────────────
    @field_validator("PASSWORD_HASH_SCHEMES", mode="before")
    @classmethod
    def _assemble_hash_schemes(cls, v: str | List[str]):
        if isinstance(v, str):
            return _split_csv(v)
        return v

    @field_validator("API_V1_STR", mode="before")
    @classmethod
    def _normalize_api_prefix(cls, v: str | None) -> str:
        s = (v or "/api/v1").strip()
        if not s.startswith("/"):
            s = "/" + s
        return s.rstrip("/")

    # ── Derived / convenience properties ─────────────────────
    @property
    def DATABASE_URL(self) -> str:
        """Sync DSN (used by Alembic offline mode)."""
        if self.DATABASE_URL_OVERRIDE:
            return (
                self.DATABASE_URL_OVERRIDE
                .replace("+asyncpg", "")
                .replace("+aiosqlite", "")
            )
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD.get_secret_value()}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def ASYNC_DATABASE_URL(self) -> str:
        """Async SQLAlchemy DSN."""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return self.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://")


settings = Settings()

__all__ = ["Settings", "settings"]
