"""
Database configuration settings.

Manages the async SQLAlchemy connection used by the knowledge store.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bizbot.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Knowledge store database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BIZBOT_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite+aiosqlite:///./bizbot.db",
        description="Async SQLAlchemy URL (sqlite+aiosqlite or postgresql+asyncpg)",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
    pool_pre_ping: bool = Field(default=True, description="Verify connections before use")
