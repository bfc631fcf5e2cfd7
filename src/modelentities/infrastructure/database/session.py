# Copyright (c) Modelentities.
# SPDX-License-Identifier: MIT
"""SQLAlchemy engine/session factory.

Builds the engine from ``Settings.database_url`` so callers never hard-code a
connection URL. No business logic here; mappers and callers own the unit of
work.

Lifecycle:
    * Call `create_engine_from_settings()` once at startup.
    * Use `create_sessionmaker(engine)` to open sessions.
    * Call `engine.dispose()` during shutdown.
"""

from __future__ import annotations

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from modelentities.config.settings import Settings, get_settings

__all__ = ["create_engine_from_settings", "create_sessionmaker"]


def create_engine_from_settings(settings: Settings | None = None) -> Engine:
    """Create a SQLAlchemy engine for the configured database.

    Args:
        settings: Settings providing `database_url`. Defaults to `get_settings()`.

    Returns:
        Engine: A new engine.

    Raises:
        ValueError: If `database_url` is empty.
    """
    settings = settings or get_settings()
    if not settings.database_url:
        raise ValueError("database_url must be configured")
    return create_engine(settings.database_url, future=True, pool_pre_ping=True)


def create_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(bind=engine, expire_on_commit=False)
