"""OAuth2 password-grant client for the identity provider."""

from __future__ import annotations

import httpx

from iam.infrastructure.observability import (
    DefaultIdentityProviderProbe,
    IdentityProviderProbe,
)
from iam.ports.exceptions import (
    ProviderAuthenticationError,
    ProviderUnavailableError,
)
from iam.ports.identity_provider import IIdentityProvider, ProviderSession
from shared_kernel.auth import DiscoveryError, OIDCDiscoveryClient


class OIDCIdentityProvider(IIdentityProvider):
    """Signs users in through the provider's token endpoint."""

    def __init__(
        self,
        discovery: OIDCDiscoveryClient,
        client_id: str,
        client_secret: str,
        probe: IdentityProviderProbe | None = None,
    ) -> None:
        self._discovery = discovery
        self._client_id = client_id
        self._client_secret = client_secret
        self._probe = probe or DefaultIdentityProviderProbe()

    async def sign_in_with_password(self, email: str, password: str) -> ProviderSession:
        """Run a resource-owner password grant.

        Args:
            email: Account email, sent as the username
            password: Account password

        Returns:
            The issued provider tokens

        Raises:
            ProviderAuthenticationError: If the provider rejects the credentials
            ProviderUnavailableError: If the provider cannot be reached
        """
        try:
            token_endpoint = await self._discovery.get_endpoint("token_endpoint")
        except DiscoveryError as e:
            raise ProviderUnavailableError(str(e)) from e

        data = {
            "grant_type": "password",
            "username": email,
            "password": password,
            "client_id": self._client_id,
            "scope": "openid email profile",
        }
        if self._client_secret:
            data["client_secret"] = self._client_secret

        try:
            async with httpx.AsyncClient(timeout=self._discovery.timeout) as client:
                response = await client.post(token_endpoint, data=data)
        except httpx.HTTPError as e:
            self._probe.provider_request_failed(error=str(e))
            raise ProviderUnavailableError("Identity provider unreachable") from e

        if response.status_code in (400, 401, 403):
            self._probe.password_grant_rejected(status_code=response.status_code)
            raise ProviderAuthenticationError("Invalid login credentials")

        if response.status_code != 200:
            self._probe.provider_request_failed(
                error=f"token endpoint returned {response.status_code}"
            )
            raise ProviderUnavailableError("Identity provider error")

        try:
            payload = response.json()
            access_token = payload["access_token"]
        except (ValueError, KeyError) as e:
            self._probe.provider_request_failed(error="malformed token response")
            raise ProviderUnavailableError("Identity provider error") from e

        return ProviderSession(
            access_token=access_token,
            token_type=payload.get("token_type", "bearer"),
            expires_in=payload.get("expires_in"),
            refresh_token=payload.get("refresh_token"),
        )
