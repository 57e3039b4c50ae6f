"""User application service for IAM bounded context.

Handles just-in-time provisioning of provider subjects and the admin
user-management use cases.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import DefaultUserServiceProbe, UserServiceProbe
from iam.application.value_objects import UserPage
from iam.domain.aggregates import User
from iam.domain.value_objects import Role, UserId
from iam.ports.exceptions import (
    IdentityProvisioningError,
    InvalidProfileError,
    UserNotFoundError,
)
from iam.ports.repositories import IUserRepository
from shared_kernel.auth import TokenClaims

MAX_PAGE_SIZE = 500


class UserService:
    """Application service for user management.

    Every public method owns exactly one transaction on the request session.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        session: AsyncSession,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            user_repository: Repository for user persistence
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._probe = probe or DefaultUserServiceProbe()
        self._session = session

    async def ensure_identity(self, claims: TokenClaims) -> User:
        """Find or create the local user for a verified provider subject.

        The existing record is returned untouched: role and name are owned
        locally and never synced from the token.

        Args:
            claims: Claims of an already verified token

        Returns:
            The User aggregate (existing or newly created)

        Raises:
            IdentityProvisioningError: If a new user cannot be created
        """
        try:
            return await self._find_or_create(claims)
        except IntegrityError:
            # A concurrent request created the same subject first
            async with self._session.begin():
                existing = await self._user_repository.get_by_external_id(claims.sub)
            if existing is None:
                self._probe.identity_provision_failed(
                    external_id=claims.sub, error="unique violation without a row"
                )
                raise IdentityProvisioningError(
                    f"Could not provision user for subject {claims.sub}"
                )
            self._probe.identity_provisioned(
                user_id=existing.id.value,
                external_id=claims.sub,
                was_created=False,
            )
            return existing
        except IdentityProvisioningError:
            raise
        except Exception as e:
            self._probe.identity_provision_failed(external_id=claims.sub, error=str(e))
            raise

    async def _find_or_create(self, claims: TokenClaims) -> User:
        async with self._session.begin():
            existing = await self._user_repository.get_by_external_id(claims.sub)
            if existing is not None:
                self._probe.identity_provisioned(
                    user_id=existing.id.value,
                    external_id=claims.sub,
                    was_created=False,
                )
                return existing

            if not claims.email:
                self._probe.identity_provision_failed(
                    external_id=claims.sub, error="missing email claim"
                )
                raise IdentityProvisioningError(
                    "Identity provider did not report an email address"
                )

            user = User.provision(
                external_id=claims.sub,
                email=claims.email,
                name=claims.name,
            )
            await self._user_repository.save(user)

            self._probe.identity_provisioned(
                user_id=user.id.value,
                external_id=claims.sub,
                was_created=True,
            )
            return user

    async def list_users(self, page: int = 1, limit: int = 20) -> UserPage:
        """List users newest first.

        ``page`` is clamped to at least 1 and ``limit`` to 1..500.
        """
        page = max(1, page)
        limit = min(MAX_PAGE_SIZE, max(1, limit))

        async with self._session.begin():
            users = await self._user_repository.list_page(
                offset=(page - 1) * limit, limit=limit
            )
            total = await self._user_repository.count()

        self._probe.users_listed(page=page, count=len(users), total=total)
        return UserPage(users=users, total=total, page=page, limit=limit)

    async def get_user(self, user_id: UserId) -> User:
        """Load one user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        async with self._session.begin():
            user = await self._user_repository.get_by_id(user_id)

        if user is None:
            self._probe.user_not_found(user_id=user_id.value)
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    async def change_role(self, user_id: UserId, role: Role) -> User:
        """Set a user's role.

        Raises:
            UserNotFoundError: If no user has this id
        """
        async with self._session.begin():
            user = await self._user_repository.get_by_id(user_id)
            if user is None:
                self._probe.user_not_found(user_id=user_id.value)
                raise UserNotFoundError(f"User {user_id} not found")

            updated = user.with_role(role)
            await self._user_repository.save(updated)

        self._probe.user_role_changed(
            user_id=user_id.value,
            old_role=user.role.value,
            new_role=role.value,
        )
        return updated

    async def update_profile(
        self,
        user_id: UserId,
        name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> User:
        """Update the provided profile fields.

        Raises:
            UserNotFoundError: If no user has this id
            InvalidProfileError: If a field breaks its rule
        """
        async with self._session.begin():
            user = await self._user_repository.get_by_id(user_id)
            if user is None:
                self._probe.user_not_found(user_id=user_id.value)
                raise UserNotFoundError(f"User {user_id} not found")

            try:
                updated = user.with_profile(name=name, phone=phone, address=address)
            except ValueError as e:
                raise InvalidProfileError(str(e)) from e
            await self._user_repository.save(updated)

        self._probe.user_profile_updated(user_id=user_id.value)
        return updated
