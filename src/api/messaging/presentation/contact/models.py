"""Request and response models for contact endpoints."""

from __future__ import annotations

from datetime import datetime

from messaging.application.value_objects import Inbox
from messaging.domain.aggregates import Message
from messaging.domain.value_objects import MessageStatus
from shared_kernel.api_models import APIModel

SUBMITTED_MESSAGE = (
    "Your message has been sent successfully! We will get back to you soon."
)


class ContactRequest(APIModel):
    """Contact form. Fields are checked by the handler for its own messages."""

    name: str | None = None
    email: str | None = None
    subject: str | None = None
    message: str | None = None


class ContactResponse(APIModel):
    success: bool = True
    message: str = SUBMITTED_MESSAGE
    message_id: str


class ReplyRequest(APIModel):
    message_id: str | None = None
    reply: str | None = None


class StatusUpdateRequest(APIModel):
    message_id: str | None = None
    status: str | None = None


class MessageResponse(APIModel):
    id: str
    user_id: str | None = None
    name: str
    email: str
    subject: str
    message: str
    status: MessageStatus
    reply: str | None = None
    replied_at: datetime | None = None
    replied_by: str | None = None
    is_read_by_user: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, message: Message) -> MessageResponse:
        return cls(
            id=message.id.value,
            user_id=message.user_id,
            name=message.name,
            email=message.email,
            subject=message.subject,
            message=message.body,
            status=message.status,
            reply=message.admin_reply,
            replied_at=message.replied_at,
            replied_by=message.replied_by,
            is_read_by_user=message.is_read_by_user,
            created_at=message.created_at,
            updated_at=message.updated_at,
        )


class MessageStatsResponse(APIModel):
    new: int
    read: int
    replied: int
    total: int


class InboxResponse(APIModel):
    messages: list[MessageResponse]
    total: int
    stats: MessageStatsResponse

    @classmethod
    def from_inbox(cls, inbox: Inbox) -> InboxResponse:
        return cls(
            messages=[MessageResponse.from_domain(m) for m in inbox.messages],
            total=len(inbox.messages),
            stats=MessageStatsResponse(
                new=inbox.stats.new,
                read=inbox.stats.read,
                replied=inbox.stats.replied,
                total=inbox.stats.total,
            ),
        )


class MessageUpdatedResponse(APIModel):
    success: bool = True
    message: str
    updated_message: MessageResponse
