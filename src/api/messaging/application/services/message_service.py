"""Messaging application service.

Contact-form intake, the admin inbox, and each customer's own mailbox.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from messaging.application.observability import (
    DefaultMessageServiceProbe,
    MessageServiceProbe,
)
from messaging.application.value_objects import Inbox, Mailbox, MessageStats
from messaging.domain.aggregates import Message
from messaging.domain.value_objects import MessageId, MessageStatus
from messaging.ports.exceptions import MessageNotFoundError
from messaging.ports.repositories import IMessageRepository

DEFAULT_REPLIER = "Admin"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MessageService:
    def __init__(
        self,
        session: AsyncSession,
        message_repository: IMessageRepository,
        probe: MessageServiceProbe | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize MessageService with dependencies.

        Args:
            session: Database session for transaction management
            message_repository: Repository for message persistence
            probe: Optional domain probe for observability
            clock: Source of reply timestamps
        """
        self._session = session
        self._messages = message_repository
        self._probe = probe or DefaultMessageServiceProbe()
        self._clock = clock

    async def submit_message(
        self,
        name: str | None,
        email: str | None,
        subject: str | None,
        body: str | None,
        user_id: str | None = None,
    ) -> Message:
        """Store a contact-form submission.

        Args:
            user_id: Sender's account when they were signed in

        Raises:
            ValueError: If a field is missing or the email is malformed
        """
        message = Message.submit(
            name=name, email=email, subject=subject, body=body, user_id=user_id
        )
        async with self._session.begin():
            await self._messages.save(message)

        self._probe.message_received(
            message_id=message.id.value, signed_in=user_id is not None
        )
        return message

    async def list_inbox(self, status: MessageStatus | None = None) -> Inbox:
        async with self._session.begin():
            messages = await self._messages.list_all(status=status)
            counts = await self._messages.count_by_status()
        return Inbox(messages=messages, stats=MessageStats.from_counts(counts))

    async def reply(
        self, message_id: MessageId, reply: str, replied_by: str | None
    ) -> Message:
        """Store the admin's reply and mark the message replied.

        Raises:
            MessageNotFoundError: If no message has this id
            ValueError: If the reply is blank
        """
        async with self._session.begin():
            message = await self._messages.get_by_id(message_id)
            if message is None:
                raise MessageNotFoundError(f"Message {message_id} not found")
            updated = message.replied(
                reply, replied_by=replied_by or DEFAULT_REPLIER, now=self._clock()
            )
            await self._messages.save(updated)

        self._probe.message_replied(
            message_id=message_id.value, replied_by=updated.replied_by
        )
        return updated

    async def set_status(self, message_id: MessageId, status: MessageStatus) -> Message:
        async with self._session.begin():
            message = await self._messages.get_by_id(message_id)
            if message is None:
                raise MessageNotFoundError(f"Message {message_id} not found")
            updated = message.with_status(status)
            await self._messages.save(updated)

        self._probe.message_status_changed(
            message_id=message_id.value, status=status.value
        )
        return updated

    async def mailbox(self, user_id: str, email: str) -> Mailbox:
        async with self._session.begin():
            return Mailbox(messages=await self._messages.list_for_owner(user_id, email))

    async def mark_read(self, message_id: MessageId, user_id: str, email: str) -> None:
        """Mark the caller's message as read.

        Messages belonging to someone else are left untouched, so the call
        reveals nothing about them.
        """
        async with self._session.begin():
            message = await self._messages.get_by_id(message_id)
            if message is None or not message.is_owned_by(user_id, email):
                return
            await self._messages.save(message.read_by_owner())

        self._probe.message_read_by_owner(message_id=message_id.value, user_id=user_id)
