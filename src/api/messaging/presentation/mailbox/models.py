"""Request and response models for a customer's own messages."""

from __future__ import annotations

from datetime import datetime

from messaging.application.value_objects import Mailbox
from messaging.domain.aggregates import Message
from messaging.domain.value_objects import MessageStatus
from shared_kernel.api_models import APIModel


class MailboxMessageResponse(APIModel):
    """A message as its sender sees it; admin-only fields are omitted."""

    id: str
    subject: str
    message: str
    reply: str | None = None
    replied_at: datetime | None = None
    status: MessageStatus
    is_read_by_user: bool
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, message: Message) -> MailboxMessageResponse:
        return cls(
            id=message.id.value,
            subject=message.subject,
            message=message.body,
            reply=message.admin_reply,
            replied_at=message.replied_at,
            status=MessageStatus.REPLIED if message.admin_reply else MessageStatus.NEW,
            is_read_by_user=message.is_read_by_user,
            created_at=message.created_at,
        )


class MailboxResponse(APIModel):
    messages: list[MailboxMessageResponse]
    total: int
    unread_count: int

    @classmethod
    def from_mailbox(cls, mailbox: Mailbox) -> MailboxResponse:
        return cls(
            messages=[MailboxMessageResponse.from_domain(m) for m in mailbox.messages],
            total=len(mailbox.messages),
            unread_count=mailbox.unread_count,
        )


class MarkReadRequest(APIModel):
    message_id: str | None = None
