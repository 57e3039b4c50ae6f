"""Bearer token verification shared by every context.

The identity provider signs tokens; these modules discover its keys and
verify tokens against them. Nothing here knows about local users.
"""

from shared_kernel.auth.discovery import DiscoveryError, OIDCDiscoveryClient
from shared_kernel.auth.jwt_validator import (
    InvalidTokenError,
    JWTValidator,
    TokenClaims,
)
from shared_kernel.auth.observability import (
    DefaultJWTValidatorProbe,
    JWTValidatorProbe,
)

__all__ = [
    "DiscoveryError",
    "InvalidTokenError",
    "JWTValidator",
    "JWTValidatorProbe",
    "DefaultJWTValidatorProbe",
    "OIDCDiscoveryClient",
    "TokenClaims",
]
