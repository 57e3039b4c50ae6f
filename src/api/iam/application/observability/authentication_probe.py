"""Protocol for authentication observability.

Defines the interface for domain probes that capture bearer-token
verification and sign-in events.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class AuthenticationProbe(Protocol):
    """Domain probe for authentication operations."""

    def identity_verified(self, user_id: str, role: str) -> None:
        """Record that a bearer token resolved to a local identity."""
        ...

    def bearer_token_rejected(self, reason: str) -> None:
        """Record that a bearer token could not be turned into an identity."""
        ...

    def sign_in_succeeded(self, user_id: str) -> None:
        """Record a successful password sign-in."""
        ...

    def sign_in_failed(self, reason: str) -> None:
        """Record a failed password sign-in (never includes credentials)."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def identity_verified(self, user_id: str, role: str) -> None:
        self._logger.debug("identity_verified", user_id=user_id, role=role)

    def bearer_token_rejected(self, reason: str) -> None:
        self._logger.warning("bearer_token_rejected", reason=reason)

    def sign_in_succeeded(self, user_id: str) -> None:
        self._logger.info("sign_in_succeeded", user_id=user_id)

    def sign_in_failed(self, reason: str) -> None:
        self._logger.info("sign_in_failed", reason=reason)
