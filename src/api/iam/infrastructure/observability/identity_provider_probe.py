"""Domain probe for calls to the identity provider's token endpoint."""

from __future__ import annotations

from typing import Protocol

import structlog


class IdentityProviderProbe(Protocol):
    def password_grant_rejected(self, status_code: int) -> None:
        """Record that the provider refused a password grant."""
        ...

    def provider_request_failed(self, error: str) -> None:
        """Record a transport or protocol failure talking to the provider."""
        ...


class DefaultIdentityProviderProbe:
    """Default implementation of IdentityProviderProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def password_grant_rejected(self, status_code: int) -> None:
        self._logger.info("password_grant_rejected", status_code=status_code)

    def provider_request_failed(self, error: str) -> None:
        self._logger.error("identity_provider_request_failed", error=error)
