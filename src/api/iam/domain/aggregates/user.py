"""User aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from iam.domain.value_objects import Role, UserId

MIN_NAME_LENGTH = 2


def default_display_name(email: str, name: str | None = None) -> str:
    """Best-effort display name: provider name, else the email local part."""
    if name and name.strip():
        return name.strip()
    return email.split("@", 1)[0]


@dataclass(frozen=True)
class User:
    """A storefront account linked to one identity-provider subject.

    Business rules:
    - Exactly one local user per provider subject id
    - New users are always customers; only an admin can promote them
    - The role stored here is authoritative over anything in a token
    """

    id: UserId
    external_id: str
    email: str
    name: str
    role: Role = Role.CUSTOMER
    phone: str | None = None
    address: str | None = None
    created_at: datetime | None = None

    @classmethod
    def provision(cls, external_id: str, email: str, name: str | None = None) -> User:
        """Create the local record for a first-seen provider subject.

        Args:
            external_id: Provider subject id
            email: Provider-reported email (required)
            name: Provider metadata name, if any

        Returns:
            A new customer User

        Raises:
            ValueError: If the email is missing
        """
        if not email:
            raise ValueError("Cannot provision a user without an email address")
        return cls(
            id=UserId.generate(),
            external_id=external_id,
            email=email,
            name=default_display_name(email, name),
            role=Role.CUSTOMER,
        )

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def with_role(self, role: Role) -> User:
        return replace(self, role=role)

    def with_profile(
        self,
        name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> User:
        """Return a copy with the provided profile fields changed.

        Raises:
            ValueError: If the new name is shorter than two characters
        """
        if name is not None and len(name.strip()) < MIN_NAME_LENGTH:
            raise ValueError("Name is too short")
        return replace(
            self,
            name=name.strip() if name is not None else self.name,
            phone=phone if phone is not None else self.phone,
            address=address if address is not None else self.address,
        )

    def __str__(self) -> str:
        return f"User({self.email})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
