"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. DATABASE_URL is validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SUPPORTED_DRIVERS = ("sqlite+aiosqlite", "postgresql+asyncpg")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. database_url must use one of the
    async drivers in _SUPPORTED_DRIVERS.
    """

    # App
    app_name: str = "todo"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: SQLite (aiosqlite) for local use, Postgres (asyncpg) in production
    database_url: str = "sqlite+aiosqlite:///./todo.db"
    database_echo: bool = False
    # Create the tasks table on startup (local/dev); production uses Alembic.
    database_auto_create: bool = True
    # Insert the sample tasks on startup when the table is empty.
    seed_sample_data: bool = False

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"
    rate_limit_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database_url(self) -> "Settings":
        """Require a database URL with a supported async driver."""
        if not self.database_url:
            raise ValueError(
                "DATABASE_URL is required. Set in environment or .env file "
                "(e.g. sqlite+aiosqlite:///./todo.db)."
            )
        driver = self.database_url.split("://", 1)[0]
        if driver not in _SUPPORTED_DRIVERS:
            raise ValueError(
                f"DATABASE_URL driver must be one of {', '.join(_SUPPORTED_DRIVERS)}, "
                f"got: {driver!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
