"""Application-layer value objects for the messaging bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from messaging.domain.aggregates import Message
from messaging.domain.value_objects import MessageStatus


@dataclass(frozen=True)
class MessageStats:
    new: int
    read: int
    replied: int

    @classmethod
    def from_counts(cls, counts: dict[MessageStatus, int]) -> MessageStats:
        return cls(
            new=counts.get(MessageStatus.NEW, 0),
            read=counts.get(MessageStatus.READ, 0),
            replied=counts.get(MessageStatus.REPLIED, 0),
        )

    @property
    def total(self) -> int:
        return self.new + self.read + self.replied


@dataclass(frozen=True)
class Inbox:
    """Admin view: filtered messages plus counts over every message."""

    messages: list[Message]
    stats: MessageStats


@dataclass(frozen=True)
class Mailbox:
    """A customer's own messages."""

    messages: list[Message]

    @property
    def unread_count(self) -> int:
        return sum(1 for message in self.messages if message.has_unread_reply)
