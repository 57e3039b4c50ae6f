"""Probes for the user repository and the identity provider client."""

from iam.infrastructure.observability.identity_provider_probe import (
    DefaultIdentityProviderProbe,
    IdentityProviderProbe,
)
from iam.infrastructure.observability.repository_probe import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)

__all__ = [
    "DefaultIdentityProviderProbe",
    "IdentityProviderProbe",
    "UserRepositoryProbe",
    "DefaultUserRepositoryProbe",
]
