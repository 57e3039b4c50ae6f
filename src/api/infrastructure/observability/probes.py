"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ConnectionProbe(Protocol):
    """Domain probe for database engine lifecycle.

    Captures engine creation and disposal without exposing logging
    implementation details to the database module.
    """

    def engine_created(
        self,
        kind: str,
        host: str,
        database: str,
        pool_size: int,
    ) -> None:
        """Record that an async engine (and its pool) was created."""
        ...

    def pool_closed(self, kind: str) -> None:
        """Record that an engine's connection pool was disposed."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def engine_created(
        self,
        kind: str,
        host: str,
        database: str,
        pool_size: int,
    ) -> None:
        """Record that an async engine (and its pool) was created."""
        self._logger.info(
            "database_engine_created",
            kind=kind,
            host=host,
            database=database,
            pool_size=pool_size,
        )

    def pool_closed(self, kind: str) -> None:
        """Record that an engine's connection pool was disposed."""
        self._logger.info("database_pool_closed", kind=kind)
