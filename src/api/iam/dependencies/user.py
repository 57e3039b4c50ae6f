"""Request-scoped identity dependencies.

Every protected route composes one of these instead of parsing headers:

- ``get_optional_identity``: identity or None (public routes that personalize)
- ``get_current_identity``: any authenticated caller, else 401
- ``require_admin``: admin callers only, 401/403 otherwise
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    AuthenticationProbe,
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from iam.application.security import require_authenticated, require_role
from iam.application.services import BearerAuthenticator, UserService
from iam.application.value_objects import AuthenticatedIdentity
from iam.dependencies.authentication import (
    get_authentication_probe,
    get_bearer_token,
    get_jwt_validator,
)
from iam.domain.value_objects import Role
from iam.infrastructure.user_repository import UserRepository
from infrastructure.database.dependencies import get_write_session
from shared_kernel.auth import JWTValidator


def get_user_service_probe() -> UserServiceProbe:
    """Get UserServiceProbe instance.

    Returns:
        DefaultUserServiceProbe instance for observability
    """
    return DefaultUserServiceProbe()


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> UserRepository:
    """Get UserRepository instance.

    Args:
        session: Async database session

    Returns:
        UserRepository instance
    """
    return UserRepository(session=session)


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    session: Annotated[AsyncSession, Depends(get_write_session)],
    probe: Annotated[UserServiceProbe, Depends(get_user_service_probe)],
) -> UserService:
    """Get UserService instance.

    Args:
        user_repo: User repository (shares session via FastAPI dependency caching)
        session: Database session for transaction management
        probe: User service probe for observability

    Returns:
        UserService instance
    """
    return UserService(user_repository=user_repo, session=session, probe=probe)


def get_authenticator(
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> BearerAuthenticator:
    return BearerAuthenticator(
        validator=validator,
        user_service=user_service,
        probe=probe,
    )


async def get_optional_identity(
    authenticator: Annotated[BearerAuthenticator, Depends(get_authenticator)],
    token: Annotated[str | None, Depends(get_bearer_token)] = None,
) -> AuthenticatedIdentity | None:
    """Verify the bearer token if one was sent.

    FastAPI caches the result per request, so composing this several times
    verifies the token once.

    Returns:
        The caller's identity, or None when no token was sent or it failed
    """
    if token is None:
        return None
    return await authenticator.verify(token)


async def get_current_identity(
    identity: Annotated[AuthenticatedIdentity | None, Depends(get_optional_identity)],
) -> AuthenticatedIdentity:
    """Require any authenticated caller.

    Raises:
        AuthenticationError: 401 when the token is missing or invalid
    """
    return require_authenticated(identity)


class RoleGate:
    """Dependency requiring one role.

    Usage:
        require_admin = RoleGate(Role.ADMIN)

        @router.get("/admin/things")
        async def list_things(
            admin: Annotated[AuthenticatedIdentity, Depends(require_admin)],
        ): ...
    """

    def __init__(self, role: Role):
        self.role = role

    async def __call__(
        self,
        identity: Annotated[
            AuthenticatedIdentity | None, Depends(get_optional_identity)
        ],
    ) -> AuthenticatedIdentity:
        return require_role(identity, self.role)


require_admin = RoleGate(Role.ADMIN)

CurrentIdentity = Annotated[AuthenticatedIdentity, Depends(get_current_identity)]
OptionalIdentity = Annotated[
    AuthenticatedIdentity | None, Depends(get_optional_identity)
]
AdminIdentity = Annotated[AuthenticatedIdentity, Depends(require_admin)]
