"""ULID-backed identifier base for aggregate ids.

Each bounded context declares its own id types as frozen subclasses so
ids of different aggregates never compare equal by accident.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from ulid import ULID

_IdT = TypeVar("_IdT", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    """Identifier for an aggregate.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls: type[_IdT]) -> _IdT:
        """Generate a new id using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls: type[_IdT], value: str) -> _IdT:
        """Create an id from its string form.

        Args:
            value: ULID string

        Returns:
            Id instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid {cls.__name__}: {value}") from e

        return cls(value=value)
