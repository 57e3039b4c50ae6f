"""Domain probe for bearer token verification."""

from __future__ import annotations

from typing import Protocol

import structlog


class JWTValidatorProbe(Protocol):
    """Records token verification outcomes and signing-key lookups."""

    def token_validated(self, user_id: str) -> None: ...

    def token_validation_failed(self, reason: str) -> None:
        """A token was rejected; ``reason`` never contains the token."""
        ...

    def jwks_fetched(self, key_count: int) -> None: ...

    def jwks_cache_hit(self) -> None: ...

    def jwks_fetch_failed(self, error: str) -> None:
        """The discovery document or key set could not be downloaded."""
        ...


class DefaultJWTValidatorProbe:
    """Default implementation of JWTValidatorProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def token_validated(self, user_id: str) -> None:
        self._logger.debug("bearer_token_accepted", subject=user_id)

    def token_validation_failed(self, reason: str) -> None:
        self._logger.warning("bearer_token_rejected", reason=reason)

    def jwks_fetched(self, key_count: int) -> None:
        self._logger.info("signing_keys_refreshed", key_count=key_count)

    def jwks_cache_hit(self) -> None:
        self._logger.debug("signing_keys_cached")

    def jwks_fetch_failed(self, error: str) -> None:
        self._logger.error("signing_keys_unavailable", error=error)
