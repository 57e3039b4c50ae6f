"""Message aggregate: a contact-form submission and the admin's reply."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from messaging.domain.value_objects import MessageId, MessageStatus, is_valid_email


@dataclass(frozen=True)
class Message:
    """A customer message.

    Business rules:
    - Name, email, subject and body are all required
    - Emails are stored trimmed and lower-cased
    - Replying marks the message replied and unread by its owner
    """

    id: MessageId
    name: str
    email: str
    subject: str
    body: str
    user_id: str | None = None
    status: MessageStatus = MessageStatus.NEW
    admin_reply: str | None = None
    replied_at: datetime | None = None
    replied_by: str | None = None
    is_read_by_user: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def submit(
        cls,
        name: str | None,
        email: str | None,
        subject: str | None,
        body: str | None,
        user_id: str | None = None,
    ) -> Message:
        """Create a new message from contact-form input.

        Raises:
            ValueError: If a field is missing or the email is malformed
        """
        fields = [(value or "").strip() for value in (name, email, subject, body)]
        if not all(fields):
            raise ValueError("All fields are required")
        name, email, subject, body = fields
        if not is_valid_email(email):
            raise ValueError("Invalid email format")

        return cls(
            id=MessageId.generate(),
            name=name,
            email=email.lower(),
            subject=subject,
            body=body,
            user_id=user_id,
        )

    def replied(self, reply: str, replied_by: str, now: datetime) -> Message:
        """Record the admin's reply.

        Raises:
            ValueError: If the reply is blank
        """
        reply = reply.strip()
        if not reply:
            raise ValueError("Reply is required")
        return replace(
            self,
            status=MessageStatus.REPLIED,
            admin_reply=reply,
            replied_at=now,
            replied_by=replied_by,
            is_read_by_user=False,
        )

    def with_status(self, status: MessageStatus) -> Message:
        return replace(self, status=status)

    def read_by_owner(self) -> Message:
        return replace(self, is_read_by_user=True)

    def is_owned_by(self, user_id: str, email: str) -> bool:
        """Owners are matched by account or, for anonymous submissions, email."""
        return self.user_id == user_id or self.email == email.lower()

    @property
    def has_unread_reply(self) -> bool:
        return self.admin_reply is not None and not self.is_read_by_user
