"""Repository protocols (ports) for IAM bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import User
from iam.domain.value_objects import UserId


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence.

    Implementations never open transactions; the calling service owns them.
    """

    async def save(self, user: User) -> None:
        """Insert or update a user."""
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by local id."""
        ...

    async def get_by_external_id(self, external_id: str) -> User | None:
        """Retrieve a user by identity-provider subject id."""
        ...

    async def list_page(self, offset: int, limit: int) -> list[User]:
        """List users, newest first."""
        ...

    async def count(self) -> int:
        """Count all users."""
        ...
