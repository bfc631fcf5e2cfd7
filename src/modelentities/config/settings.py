# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""Modelentities Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the entity adapters. Only the
    infrastructure layer reads it; domain entities never do.

Design:
    - Pydantic v2 BaseSettings with explicit ``validation_alias`` per field.
    - Environment enumeration for coarse behavior toggles (includes TEST).
    - Singleton accessor ``get_settings()`` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed configuration for the entity adapters."""

    model_config = SettingsConfigDict(extra="ignore", case_sensitive=False)

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level name.",
        validation_alias="LOG_LEVEL",
    )

    database_url: str = Field(
        default="sqlite+pysqlite:///:memory:",
        description="SQLAlchemy DB URL used for entity persistence.",
        validation_alias="DATABASE_URL",
    )

    db_schema: str | None = Field(
        default=None,
        description="Optional database schema for entity tables.",
        validation_alias="DB_SCHEMA",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @field_validator("db_schema")
    @classmethod
    def _blank_schema_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
    logger.info(
        "Settings initialized",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "log_level": settings.log_level,
                "db_schema": settings.db_schema,
            }
        },
    )
    return settings
