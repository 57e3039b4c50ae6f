"""Routes for a signed-in customer's own messages and replies."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends

from iam.dependencies.user import CurrentIdentity
from messaging.application.services import MessageService
from messaging.dependencies.message import get_message_service
from messaging.domain.value_objects import MessageId
from messaging.presentation.mailbox.models import MailboxResponse, MarkReadRequest
from shared_kernel.api_models import SuccessResponse, parse_entity_id
from shared_kernel.errors import UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(prefix="/user/messages", tags=["messages"])

MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]


@router.get(
    "",
    response_model=MailboxResponse,
    summary="List my messages",
    description="Messages sent from the caller's account or email, newest first.",
)
async def list_my_messages(
    identity: CurrentIdentity, service: MessageServiceDep
) -> MailboxResponse:
    try:
        mailbox = await service.mailbox(identity.user_id.value, identity.email)
        return MailboxResponse.from_mailbox(mailbox)
    except Exception as e:
        logger.error("mailbox_fetch_failed", error=str(e))
        raise UnexpectedError("Failed to fetch messages")


@router.patch(
    "",
    response_model=SuccessResponse,
    summary="Mark one of my messages as read",
    responses={400: {"description": "Message ID missing"}},
)
async def mark_message_read(
    request: MarkReadRequest,
    identity: CurrentIdentity,
    service: MessageServiceDep,
) -> SuccessResponse:
    if not request.message_id:
        raise ValidationError("Message ID is required")
    message_id = parse_entity_id(MessageId, request.message_id, "message ID")
    try:
        await service.mark_read(message_id, identity.user_id.value, identity.email)
        return SuccessResponse()
    except Exception as e:
        logger.error("mailbox_mark_read_failed", error=str(e))
        raise UnexpectedError("Failed to update message")
