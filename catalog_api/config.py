"""
Configuration management using Pydantic Settings.
Challenge: Centralized config, env validation, type safety.
Design: Single source of truth for all environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Catalog API"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Database (PostgreSQL). database_url wins over the individual parts when set.
    database_url: Optional[str] = None
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = "postgres"
    database_name: str = "nestdb"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    # Create missing tables on startup (use Alembic for real schema changes)
    db_synchronize: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 100

    @property
    def async_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request (performance)."""
    return Settings()
