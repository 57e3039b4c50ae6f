"""Value objects for IAM domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from shared_kernel.identifiers import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Identifier for a local User record (not the provider subject id)."""


class Role(StrEnum):
    """Coarse storefront roles.

    Roles live only in local storage; token claims never grant a role.
    """

    ADMIN = "admin"
    CUSTOMER = "customer"
