"""PostgreSQL implementation of IMessageRepository."""

from __future__ import annotations

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from messaging.domain.aggregates import Message
from messaging.domain.value_objects import MessageId, MessageStatus
from messaging.infrastructure.models import MessageModel
from messaging.ports.repositories import IMessageRepository


class MessageRepository(IMessageRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, message: Message) -> None:
        model = await self._session.get(MessageModel, message.id.value)
        if model is None:
            model = MessageModel(id=message.id.value)
            self._session.add(model)

        model.user_id = message.user_id
        model.name = message.name
        model.email = message.email
        model.subject = message.subject
        model.message = message.body
        model.status = message.status.value
        model.admin_reply = message.admin_reply
        model.reply_at = message.replied_at
        model.replied_by = message.replied_by
        model.is_read_by_user = message.is_read_by_user
        await self._session.flush()

    async def get_by_id(self, message_id: MessageId) -> Message | None:
        model = await self._session.get(MessageModel, message_id.value)
        return self._to_domain(model) if model else None

    async def list_all(self, status: MessageStatus | None = None) -> list[Message]:
        stmt = select(MessageModel).order_by(MessageModel.created_at.desc())
        if status is not None:
            stmt = stmt.where(MessageModel.status == status.value)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count_by_status(self) -> dict[MessageStatus, int]:
        stmt = select(MessageModel.status, func.count()).group_by(MessageModel.status)
        result = await self._session.execute(stmt)
        return {MessageStatus(status): count for status, count in result.all()}

    async def list_for_owner(self, user_id: str, email: str) -> list[Message]:
        stmt = (
            select(MessageModel)
            .where(
                or_(
                    MessageModel.user_id == user_id,
                    MessageModel.email == email.lower(),
                )
            )
            .order_by(MessageModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: MessageModel) -> Message:
        return Message(
            id=MessageId(value=model.id),
            name=model.name,
            email=model.email,
            subject=model.subject,
            body=model.message,
            user_id=model.user_id,
            status=MessageStatus(model.status),
            admin_reply=model.admin_reply,
            replied_at=model.reply_at,
            replied_by=model.replied_by,
            is_read_by_user=model.is_read_by_user,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
