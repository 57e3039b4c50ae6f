"""Ports for the IAM context: user storage and the identity provider."""

from iam.ports.identity_provider import IIdentityProvider, ProviderSession
from iam.ports.repositories import IUserRepository

__all__ = [
    "IIdentityProvider",
    "IUserRepository",
    "ProviderSession",
]
