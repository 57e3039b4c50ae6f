"""Bearer-token authenticator.

Turns a caller-supplied token into an ``AuthenticatedIdentity`` or None.
Callers cannot tell why a token was refused; the reason is only logged.
"""

from __future__ import annotations

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.services.user_service import UserService
from iam.application.value_objects import AuthenticatedIdentity
from shared_kernel.auth import InvalidTokenError, JWTValidator


class BearerAuthenticator:
    """Verifies bearer tokens and links them to local users."""

    def __init__(
        self,
        validator: JWTValidator,
        user_service: UserService,
        probe: AuthenticationProbe | None = None,
    ):
        self._validator = validator
        self._user_service = user_service
        self._probe = probe or DefaultAuthenticationProbe()

    async def verify(self, token: str) -> AuthenticatedIdentity | None:
        """Verify ``token`` and return the caller's identity.

        The role always comes from the local record. A first-seen subject
        is provisioned as a customer.

        Args:
            token: Raw bearer token

        Returns:
            The identity, or None for any provider, network or storage failure
        """
        try:
            claims = await self._validator.validate_token(token)
        except InvalidTokenError as e:
            self._probe.bearer_token_rejected(reason=str(e))
            return None

        try:
            user = await self._user_service.ensure_identity(claims)
        except Exception as e:
            self._probe.bearer_token_rejected(
                reason=f"provisioning failed: {type(e).__name__}"
            )
            return None

        self._probe.identity_verified(user_id=user.id.value, role=user.role.value)
        return AuthenticatedIdentity.from_user(
            user,
            email=claims.email,
            email_verified=claims.email_verified,
        )
