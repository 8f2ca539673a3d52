"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - database_url always names an async driver

Design Decisions:
    - pydantic-settings over raw os.environ: typed fields and .env loading
    - SQLite file default: runs with no external services, same as the `tasks.db` layout
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./tasks.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sync_url(cls, v: str) -> str:
        """Plain driver URLs are rewritten to their async counterparts."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    graphql_ide: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
