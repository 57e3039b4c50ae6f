"""Application-scoped authentication collaborators.

The validator and provider client are cached with ``lru_cache`` so the
JWKS and discovery caches survive across requests.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.infrastructure.identity_provider import OIDCIdentityProvider
from iam.ports.identity_provider import IIdentityProvider
from infrastructure.settings import get_oidc_settings
from shared_kernel.auth import JWTValidator, OIDCDiscoveryClient
from shared_kernel.auth.observability import DefaultJWTValidatorProbe

# auto_error=False: missing credentials are decided by the role gate
bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> str | None:
    """Extract the raw bearer token, or None when absent."""
    if credentials is None or not credentials.credentials:
        return None
    return credentials.credentials


@lru_cache
def get_discovery_client() -> OIDCDiscoveryClient:
    """Get cached provider discovery client."""
    settings = get_oidc_settings()
    return OIDCDiscoveryClient(
        issuer_url=settings.issuer_url,
        probe=DefaultJWTValidatorProbe(),
        timeout=settings.http_timeout_seconds,
    )


@lru_cache
def get_jwt_validator() -> JWTValidator:
    """Get cached JWT validator.

    A single instance is reused across requests so its JWKS cache is shared.

    Returns:
        JWTValidator instance configured from OIDC settings.
    """
    settings = get_oidc_settings()
    return JWTValidator(
        discovery=get_discovery_client(),
        audience=settings.effective_audience,
        probe=DefaultJWTValidatorProbe(),
        user_id_claim=settings.user_id_claim,
        jwks_cache_ttl=timedelta(seconds=settings.jwks_cache_ttl_seconds),
    )


@lru_cache
def get_identity_provider() -> IIdentityProvider:
    """Get cached password-grant client."""
    settings = get_oidc_settings()
    return OIDCIdentityProvider(
        discovery=get_discovery_client(),
        client_id=settings.client_id,
        client_secret=settings.client_secret.get_secret_value(),
    )


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance.

    Returns:
        DefaultAuthenticationProbe instance for observability
    """
    return DefaultAuthenticationProbe()
