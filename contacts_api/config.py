"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from environment variables or .env (never hardcoded secrets)
    - get_settings() is cached (lru_cache): single instance per process
    - environment == "test" switches the store to test_database_url

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults work out-of-the-box with a local SQLite file
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_async_driver(url: str) -> str:
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: str = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./contacts.db"
    test_database_url: str = "sqlite+aiosqlite:///:memory:"

    @field_validator("database_url", "test_database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs use postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            return _to_async_driver(v)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_tables: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    host: str = "0.0.0.0"
    port: int = 3001

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def effective_database_url(self) -> str:
        if self.environment == "test":
            return self.test_database_url
        return self.database_url


@lru_cache
def get_settings() -> Settings:
    return Settings()
