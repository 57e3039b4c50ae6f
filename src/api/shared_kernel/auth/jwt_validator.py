"""Bearer token verification against the identity provider's signing keys.

Tokens are RS256 JWTs issued by the provider. The key set is looked up
through the discovery document and cached for ``jwks_cache_ttl``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import httpx
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

from shared_kernel.auth.discovery import DiscoveryError

if TYPE_CHECKING:
    from shared_kernel.auth.discovery import OIDCDiscoveryClient
    from shared_kernel.auth.observability import JWTValidatorProbe

SIGNING_ALGORITHMS = ["RS256"]


@dataclass(frozen=True)
class TokenClaims:
    """The subset of a verified token the storefront relies on.

    Attributes:
        sub: Provider subject id of the caller
        email: Provider-confirmed email address, if present
        name: Display name from the ``name`` claim or ``user_metadata.name``
        email_verified: Provider's email verification flag
    """

    sub: str
    email: str | None
    name: str | None
    email_verified: bool


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be trusted."""

    pass


def _classify(error: JWTError) -> tuple[str, str]:
    """Map a jose decode error to (probe reason, error message)."""
    if isinstance(error, ExpiredSignatureError):
        return "Token expired", "Token has expired"
    text = str(error).lower()
    if isinstance(error, JWTClaimsError):
        if "audience" in text:
            return "Invalid audience", "Invalid audience claim"
        if "issuer" in text:
            return "Invalid issuer", "Invalid issuer claim"
        return f"Claims error: {error}", f"Invalid token claims: {error}"
    if "signature" in text:
        return "Invalid signature", "Invalid token signature"
    return f"JWT error: {error}", f"Invalid token: {error}"


class JWTValidator:
    """Verifies signature, expiry, issuer and audience of bearer tokens.

    Only identity claims are read. Roles always come from the local user
    record, never from the token.
    """

    def __init__(
        self,
        discovery: OIDCDiscoveryClient,
        audience: str,
        probe: JWTValidatorProbe,
        user_id_claim: str = "sub",
        jwks_cache_ttl: timedelta = timedelta(hours=1),
    ):
        self._discovery = discovery
        self._audience = audience
        self._probe = probe
        self._user_id_claim = user_id_claim
        self._jwks_cache_ttl = jwks_cache_ttl

        self._jwks: dict[str, Any] | None = None
        self._jwks_fetched_at: datetime | None = None
        self._jwks_lock = asyncio.Lock()

    async def validate_token(self, token: str) -> TokenClaims:
        """Verify ``token`` and return its identity claims.

        Raises:
            InvalidTokenError: If the token is malformed, expired, signed by
                another key or issued for another audience
        """
        try:
            header = jwt.get_unverified_header(token)
        except JWTError as e:
            raise self._reject(
                f"Malformed token: {e}", f"Invalid token format: {e}"
            ) from e
        if not header:
            raise self._reject("Missing token header", "Invalid token: missing header")

        jwks = await self._get_jwks()
        try:
            claims = jwt.decode(
                token=token,
                key=jwks,
                algorithms=SIGNING_ALGORITHMS,
                audience=self._audience,
                issuer=self._discovery.issuer_url,
                options={"verify_at_hash": False},
            )
        except JWTError as e:
            raise self._reject(*_classify(e)) from e

        subject = claims.get(self._user_id_claim)
        if subject is None:
            raise self._reject(
                f"Missing {self._user_id_claim} claim",
                f"Missing required claim: {self._user_id_claim}",
            )

        self._probe.token_validated(user_id=str(subject))
        return TokenClaims(
            sub=str(subject),
            email=_optional_str(claims.get("email")),
            name=_display_name(claims),
            email_verified=bool(claims.get("email_verified", False)),
        )

    def _reject(self, reason: str, message: str) -> InvalidTokenError:
        self._probe.token_validation_failed(reason=reason)
        return InvalidTokenError(message)

    async def _get_jwks(self) -> dict[str, Any]:
        if self._jwks_is_fresh():
            self._probe.jwks_cache_hit()
            return self._jwks  # type: ignore[return-value]

        async with self._jwks_lock:
            # a concurrent request may have refreshed it while we waited
            if self._jwks_is_fresh():
                self._probe.jwks_cache_hit()
                return self._jwks  # type: ignore[return-value]
            return await self._fetch_jwks()

    def _jwks_is_fresh(self) -> bool:
        if self._jwks is None or self._jwks_fetched_at is None:
            return False
        age = datetime.now(tz=timezone.utc) - self._jwks_fetched_at
        return age < self._jwks_cache_ttl

    async def _fetch_jwks(self) -> dict[str, Any]:
        """Download the provider's key set and cache it.

        Raises:
            InvalidTokenError: If discovery or the key download fails
        """
        try:
            jwks_uri = await self._discovery.get_endpoint("jwks_uri")
            async with httpx.AsyncClient(timeout=self._discovery.timeout) as client:
                response = await client.get(jwks_uri)
                response.raise_for_status()
                jwks = response.json()
        except DiscoveryError as e:
            raise InvalidTokenError(str(e)) from e
        except (httpx.HTTPError, ValueError) as e:
            self._probe.jwks_fetch_failed(error=str(e))
            raise InvalidTokenError(
                f"Failed to fetch JWKS from identity provider: {e}"
            ) from e

        self._jwks = jwks
        self._jwks_fetched_at = datetime.now(tz=timezone.utc)
        self._probe.jwks_fetched(key_count=len(jwks.get("keys", [])))
        return jwks


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _display_name(claims: dict[str, Any]) -> str | None:
    name = _optional_str(claims.get("name"))
    if name:
        return name
    metadata = claims.get("user_metadata")
    if isinstance(metadata, dict):
        return _optional_str(metadata.get("name"))
    return None
