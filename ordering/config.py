"""Application configuration and logging setup."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "production", "test"]


class Settings(BaseSettings):
    """Settings read from the environment or a local ``.env`` file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    ENVIRONMENT: Environment = "development"

    DATABASE_URL: str = "sqlite:///./orders.db"
    # Seconds a SQLite connection waits for another writer's lock
    SQLITE_BUSY_TIMEOUT: float = Field(default=5.0, gt=0)
    # Which order repository the container hands out
    PERSISTENCE_BACKEND: Literal["sqlalchemy", "memory"] = "sqlalchemy"

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def require_database_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "DATABASE_URL cannot be empty"
            raise ValueError(msg)
        return value


def _renderer(environment: str) -> Callable[..., Any]:
    if environment == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(environment: str = "development") -> None:
    """
    Route structlog through stdlib logging.

    Production logs are JSON lines; every other environment gets the
    coloured console renderer. Development also logs at DEBUG.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(environment),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
