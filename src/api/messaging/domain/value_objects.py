"""Value objects for the messaging domain."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from shared_kernel.identifiers import EntityId

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class MessageId(EntityId):
    pass


class MessageStatus(StrEnum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"


def is_valid_email(value: str) -> bool:
    """Loose shape check: one ``@`` and a dotted domain, no whitespace."""
    return bool(_EMAIL_PATTERN.match(value))
