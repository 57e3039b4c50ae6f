"""Application-layer value objects for IAM bounded context.

These represent the authentication context of a request rather than core
business entities.
"""

from __future__ import annotations

from dataclasses import dataclass

from iam.domain.aggregates import User
from iam.domain.value_objects import Role, UserId


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """The caller behind a verified bearer token.

    Merges provider-confirmed facts (email, verification flag) with the
    locally authoritative profile (id, name, role).
    """

    user_id: UserId
    external_id: str
    email: str
    name: str
    role: Role
    email_verified: bool

    @classmethod
    def from_user(
        cls, user: User, email: str | None, email_verified: bool
    ) -> AuthenticatedIdentity:
        return cls(
            user_id=user.id,
            external_id=user.external_id,
            email=email or user.email,
            name=user.name,
            role=user.role,
            email_verified=email_verified,
        )

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class UserPage:
    """One page of users plus the total count."""

    users: list[User]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1
