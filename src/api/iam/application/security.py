"""Role gate for authenticated identities.

Pure checks shared by every admin-only and customer route. They raise the
taxonomy errors directly so FastAPI dependencies can compose them.
"""

from __future__ import annotations

from iam.application.value_objects import AuthenticatedIdentity
from iam.domain.value_objects import Role
from shared_kernel.errors import AuthenticationError, AuthorizationError


def require_authenticated(
    identity: AuthenticatedIdentity | None,
    error: str = "Unauthorized",
) -> AuthenticatedIdentity:
    """Return the identity, or raise 401 when there is none.

    Raises:
        AuthenticationError: If identity is None
    """
    if identity is None:
        raise AuthenticationError(error, headers={"WWW-Authenticate": "Bearer"})
    return identity


def require_role(
    identity: AuthenticatedIdentity | None,
    role: Role,
) -> AuthenticatedIdentity:
    """Return the identity when it holds ``role``.

    Raises:
        AuthenticationError: If identity is None (401)
        AuthorizationError: If the identity has another role (403)
    """
    identity = require_authenticated(identity)
    if identity.role != role:
        raise AuthorizationError()
    return identity
