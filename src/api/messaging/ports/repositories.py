"""Repository protocols (ports) for the messaging bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from messaging.domain.aggregates import Message
from messaging.domain.value_objects import MessageId, MessageStatus


@runtime_checkable
class IMessageRepository(Protocol):
    async def save(self, message: Message) -> None: ...

    async def get_by_id(self, message_id: MessageId) -> Message | None: ...

    async def list_all(self, status: MessageStatus | None = None) -> list[Message]:
        """List messages newest first, optionally with one status."""
        ...

    async def count_by_status(self) -> dict[MessageStatus, int]:
        """Count messages per status; statuses with no messages may be absent."""
        ...

    async def list_for_owner(self, user_id: str, email: str) -> list[Message]:
        """List messages sent from the account or its email, newest first."""
        ...
