"""FinTrack configuration.

OS environment variables win over a ``.env`` file, which wins over the
defaults below. The file is ``$FINTRACK_ENV_FILE`` if set, otherwise the
first of ``config/.env.dev`` and ``config/.env`` that exists.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# src/fintrack_config/settings.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_CANDIDATES = ("config/.env.dev", "config/.env")


def find_env_file(root: Path = PROJECT_ROOT) -> Path | None:
    explicit = os.environ.get("FINTRACK_ENV_FILE")
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = root / path
        return path if path.exists() else None

    for candidate in ENV_FILE_CANDIDATES:
        path = root / candidate
        if path.exists():
            return path
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "FinTrack"
    debug: bool = False

    # PostgreSQL; required even when an override URL is used
    postgres_password: SecretStr
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "fintrack"
    # Any SQLAlchemy async URL, e.g. sqlite+aiosqlite:///./data/fintrack.db
    database_url_override: str | None = None

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma separated; empty disables CORS

    # Months in the dashboard trend and size of its recent-activity list
    analytics_trend_months: int = Field(default=6, ge=1, le=60)
    analytics_recent_limit: int = Field(default=10, ge=1, le=100)

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return level

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Cached settings; ``POSTGRES_PASSWORD`` must be present."""
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    get_settings.cache_clear()
