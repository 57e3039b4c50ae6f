"""Port for credential exchange with the identity provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ProviderSession:
    """Tokens issued by the provider for a successful sign-in."""

    access_token: str
    token_type: str
    expires_in: int | None
    refresh_token: str | None


@runtime_checkable
class IIdentityProvider(Protocol):
    async def sign_in_with_password(self, email: str, password: str) -> ProviderSession:
        """Exchange email and password for provider tokens.

        Raises:
            ProviderAuthenticationError: If the provider rejects the credentials
            ProviderUnavailableError: If the provider cannot be reached
        """
        ...
