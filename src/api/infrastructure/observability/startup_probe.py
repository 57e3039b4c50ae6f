"""Domain probe for application startup and lifecycle events.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events during application initialization and shutdown.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class StartupProbe(Protocol):
    """Domain probe for application lifecycle operations."""

    def application_starting(self, app_name: str, version: str) -> None:
        """Record that the application is starting up."""
        ...

    def perimeter_configured(self, allowed_origin_count: int) -> None:
        """Record the static part of the origin allow-list at startup."""
        ...

    def application_stopped(self, app_name: str) -> None:
        """Record that the application finished shutting down."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def application_starting(self, app_name: str, version: str) -> None:
        """Record that the application is starting up."""
        self._logger.info("application_starting", app_name=app_name, version=version)

    def perimeter_configured(self, allowed_origin_count: int) -> None:
        """Record the static part of the origin allow-list at startup."""
        self._logger.info(
            "perimeter_configured",
            allowed_origin_count=allowed_origin_count,
        )

    def application_stopped(self, app_name: str) -> None:
        """Record that the application finished shutting down."""
        self._logger.info("application_stopped", app_name=app_name)
