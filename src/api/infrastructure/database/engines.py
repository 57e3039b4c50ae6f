"""Async SQLAlchemy engines for the storefront database.

Two engines share one PostgreSQL database through asyncpg. Writes run at
the default isolation level; reports run at REPEATABLE READ so every count
on the dashboard comes from the same snapshot.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

if TYPE_CHECKING:
    from infrastructure.settings import DatabaseSettings

__all__ = ["EngineRole", "build_async_url", "create_engine"]


class EngineRole(StrEnum):
    WRITE = "write"
    READ = "read"


_ISOLATION_LEVELS = {
    EngineRole.WRITE: "READ COMMITTED",
    EngineRole.READ: "REPEATABLE READ",
}


def create_engine(role: EngineRole, settings: DatabaseSettings) -> AsyncEngine:
    """Create the engine for ``role`` with a hard pool cap.

    The pool never grows past ``pool_max_connections``; callers wait for a
    free connection instead.
    """
    return create_async_engine(
        build_async_url(settings),
        pool_size=settings.pool_max_connections,
        max_overflow=0,
        pool_pre_ping=True,
        isolation_level=_ISOLATION_LEVELS[role],
        echo=settings.echo,
    )


def build_async_url(settings: DatabaseSettings) -> str:
    """Render the asyncpg URL, percent-encoding the credentials."""
    url = URL.create(
        drivername="postgresql+asyncpg",
        username=settings.username,
        password=settings.password.get_secret_value(),
        host=settings.host,
        port=settings.port,
        database=settings.database,
    )
    return url.render_as_string(hide_password=False)
