"""Messaging dependency providers."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from messaging.application.observability import (
    DefaultMessageServiceProbe,
    MessageServiceProbe,
)
from messaging.application.services import MessageService
from messaging.infrastructure.message_repository import MessageRepository


def get_message_service_probe() -> MessageServiceProbe:
    return DefaultMessageServiceProbe()


def get_message_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> MessageRepository:
    return MessageRepository(session=session)


def get_message_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    repo: Annotated[MessageRepository, Depends(get_message_repository)],
    probe: Annotated[MessageServiceProbe, Depends(get_message_service_probe)],
) -> MessageService:
    return MessageService(session=session, message_repository=repo, probe=probe)
