"""OpenID Connect discovery for the identity provider.

Fetches and caches the provider's ``/.well-known/openid-configuration``
document, which names the JWKS and token endpoints.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from shared_kernel.auth.observability import JWTValidatorProbe


class DiscoveryError(Exception):
    """Raised when the provider's discovery document cannot be used."""

    pass


class OIDCDiscoveryClient:
    """Fetches the provider configuration once and serves it from memory."""

    def __init__(
        self,
        issuer_url: str,
        probe: JWTValidatorProbe,
        timeout: float = 10.0,
    ):
        self._issuer_url = issuer_url.rstrip("/")
        self._probe = probe
        self._timeout = timeout
        self._configuration: dict[str, Any] | None = None
        self._lock = asyncio.Lock()

    @property
    def issuer_url(self) -> str:
        return self._issuer_url

    @property
    def timeout(self) -> float:
        return self._timeout

    async def get_configuration(self) -> dict[str, Any]:
        """Return the discovery document, fetching it on first use.

        Raises:
            DiscoveryError: If the document cannot be fetched or parsed.
        """
        if self._configuration is not None:
            return self._configuration

        async with self._lock:
            if self._configuration is None:
                self._configuration = await self._fetch()
            return self._configuration

    async def get_endpoint(self, name: str) -> str:
        """Return a named endpoint (e.g. ``jwks_uri``, ``token_endpoint``).

        Raises:
            DiscoveryError: If the provider does not advertise the endpoint.
        """
        configuration = await self.get_configuration()
        endpoint = configuration.get(name)
        if not endpoint:
            self._probe.jwks_fetch_failed(
                error=f"Missing {name} in OpenID configuration"
            )
            raise DiscoveryError(f"OIDC provider missing {name} in configuration")
        return str(endpoint)

    async def _fetch(self) -> dict[str, Any]:
        url = f"{self._issuer_url}/.well-known/openid-configuration"
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._probe.jwks_fetch_failed(error=str(e))
            raise DiscoveryError(f"Failed to fetch OpenID configuration: {e}") from e
