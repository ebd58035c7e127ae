"""Configuration settings management for the task tracker.

This module provides centralized configuration using pydantic-settings with
validation, environment variable and .env file support.

Features:
- Nested BaseSettings classes for the server and the database
- Environment variable support with TASKTRACKER_ prefix
- Field validation for ports and log levels
- Global settings caching
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ServerSettings(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(env_prefix="SERVER_")

    host: str = Field("0.0.0.0", description="Interface the HTTP server binds to")
    port: int = Field(8080, ge=1, le=65535, description="HTTP server port")


class DatabaseSettings(BaseSettings):
    """Task store configuration."""

    model_config = SettingsConfigDict(env_prefix="DATABASE_")

    url: str = Field(
        "sqlite:///taskdb.sqlite3", description="Task store connection URL"
    )
    pool_timeout: int = Field(
        30, ge=1, le=300, description="Connection pool checkout timeout (seconds)"
    )
    echo_sql: bool = Field(False, description="Enable SQL query logging for debugging")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure the database directory exists for file-backed SQLite URLs."""
        prefix = "sqlite:///"
        if v.startswith(prefix) and v != f"{prefix}:memory:":
            db_path = Path(v[len(prefix) :])
            if db_path.parent != Path():
                db_path.parent.mkdir(parents=True, exist_ok=True)
        return v


class TaskTrackerSettings(BaseSettings):
    """Root configuration combining all subsystem settings."""

    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    templates_dir: Path = Field(
        PACKAGE_DIR / "templates", description="Directory holding index.html"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        env_prefix="TASKTRACKER_",
        extra="ignore",
        validate_default=True,
        case_sensitive=False,
        secrets_dir=os.getenv("TASKTRACKER_SECRETS_DIR"),
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and validate the logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> TaskTrackerSettings:
    """Get cached global settings instance.

    Returns:
        Global TaskTrackerSettings instance

    """
    return TaskTrackerSettings()


__all__ = [
    "DatabaseSettings",
    "ServerSettings",
    "TaskTrackerSettings",
    "get_settings",
]
