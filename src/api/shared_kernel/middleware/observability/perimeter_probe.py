"""Domain probe for the request perimeter.

Following Domain-Oriented Observability patterns, this probe captures
requests rejected before they reach a handler: origin-check denials and
rate-limit rejections. It also reports handler failures that escape to
the perimeter.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class PerimeterProbe(Protocol):
    """Domain probe for perimeter decisions."""

    def csrf_request_blocked(
        self,
        method: str,
        path: str,
        origin: str | None,
        referer: str | None,
        has_auth: bool,
        reason: str | None,
    ) -> None:
        """Record that a state-changing request failed the origin check."""
        ...

    def rate_limit_exceeded(
        self,
        caller: str,
        policy: str,
        path: str,
        retry_after: int,
    ) -> None:
        """Record that a caller exhausted a rate-limit window."""
        ...

    def request_failed(self, method: str, path: str, error: Exception) -> None:
        """Record that a handler raised an exception nobody translated."""
        ...


class DefaultPerimeterProbe:
    """Default implementation of PerimeterProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def csrf_request_blocked(
        self,
        method: str,
        path: str,
        origin: str | None,
        referer: str | None,
        has_auth: bool,
        reason: str | None,
    ) -> None:
        """Record that a state-changing request failed the origin check."""
        self._logger.warning(
            "csrf_request_blocked",
            method=method,
            path=path,
            origin=origin,
            referer=referer,
            has_auth=has_auth,
            reason=reason,
        )

    def rate_limit_exceeded(
        self,
        caller: str,
        policy: str,
        path: str,
        retry_after: int,
    ) -> None:
        """Record that a caller exhausted a rate-limit window."""
        self._logger.warning(
            "rate_limit_exceeded",
            caller=caller,
            policy=policy,
            path=path,
            retry_after=retry_after,
        )

    def request_failed(self, method: str, path: str, error: Exception) -> None:
        """Record that a handler raised an exception nobody translated."""
        self._logger.error(
            "request_failed",
            method=method,
            path=path,
            error=str(error),
            error_type=type(error).__name__,
            exc_info=error,
        )
