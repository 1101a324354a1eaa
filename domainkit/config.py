"""Library configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Library settings, read from ``DOMAINKIT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOMAINKIT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Overrides the level derived from ENVIRONMENT
    LOG_LEVEL: LogLevel | None = None

    # Dotted module names scanned by add_event_mappers_from_settings
    EVENT_MAPPER_MODULES: list[str] = []

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @field_validator("EVENT_MAPPER_MODULES", mode="after")
    @classmethod
    def clean_module_names(cls, value: list[str]) -> list[str]:
        """Strip whitespace, drop blanks and duplicates, keep order."""
        return list(dict.fromkeys(name.strip() for name in value if name.strip()))


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    if level is None:
        level = "DEBUG" if environment == "development" else "INFO"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: "Settings | None" = None) -> None:
    """Configure logging from ``ENVIRONMENT`` and ``LOG_LEVEL``."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
