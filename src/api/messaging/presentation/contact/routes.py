"""Contact routes.

Anyone may send a message; signed-in senders are linked to their account.
The inbox, replies and status changes are admin-only.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException

from iam.dependencies.user import AdminIdentity, OptionalIdentity
from messaging.application.services import MessageService
from messaging.dependencies.message import get_message_service
from messaging.domain.value_objects import MessageId, MessageStatus
from messaging.ports.exceptions import MessageNotFoundError
from messaging.presentation.contact.models import (
    ContactRequest,
    ContactResponse,
    InboxResponse,
    MessageResponse,
    MessageUpdatedResponse,
    ReplyRequest,
    StatusUpdateRequest,
)
from shared_kernel.api_models import parse_entity_id
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(prefix="/contact", tags=["contact"])

MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]


@router.post(
    "",
    response_model=ContactResponse,
    summary="Send a contact message",
    responses={400: {"description": "Missing fields or malformed email"}},
)
async def submit_message(
    request: ContactRequest,
    identity: OptionalIdentity,
    service: MessageServiceDep,
) -> ContactResponse:
    try:
        message = await service.submit_message(
            name=request.name,
            email=request.email,
            subject=request.subject,
            body=request.message,
            user_id=identity.user_id.value if identity else None,
        )
        return ContactResponse(message_id=message.id.value)
    except ValueError as e:
        raise ValidationError(str(e))
    except Exception as e:
        logger.error("contact_submit_failed", error=str(e))
        raise UnexpectedError("Failed to send message. Please try again later.")


@router.get(
    "",
    response_model=InboxResponse,
    summary="List contact messages",
    description="Newest first; unknown status filters are ignored.",
)
async def list_messages(
    admin: AdminIdentity,
    service: MessageServiceDep,
    status: str | None = None,
) -> InboxResponse:
    status_filter = MessageStatus(status) if status in set(MessageStatus) else None
    try:
        return InboxResponse.from_inbox(await service.list_inbox(status=status_filter))
    except Exception as e:
        logger.error("message_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch messages")


@router.post(
    "/reply",
    response_model=MessageUpdatedResponse,
    summary="Reply to a message",
    responses={
        400: {"description": "Message ID or reply missing"},
        404: {"description": "Message not found"},
    },
)
async def reply_to_message(
    request: ReplyRequest,
    admin: AdminIdentity,
    service: MessageServiceDep,
) -> MessageUpdatedResponse:
    if not request.message_id or not request.reply or not request.reply.strip():
        raise ValidationError("Message ID and reply are required")
    message_id = parse_entity_id(MessageId, request.message_id, "message ID")
    try:
        message = await service.reply(
            message_id, reply=request.reply, replied_by=admin.email
        )
        return MessageUpdatedResponse(
            message="Reply sent successfully",
            updated_message=MessageResponse.from_domain(message),
        )
    except MessageNotFoundError:
        raise NotFoundError("Message not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "message_reply_failed", message_id=request.message_id, error=str(e)
        )
        raise UnexpectedError("Failed to send reply")


@router.patch(
    "/reply",
    response_model=MessageUpdatedResponse,
    summary="Change a message's status",
    responses={
        400: {"description": "Missing fields or invalid status"},
        404: {"description": "Message not found"},
    },
)
async def update_message_status(
    request: StatusUpdateRequest,
    admin: AdminIdentity,
    service: MessageServiceDep,
) -> MessageUpdatedResponse:
    if not request.message_id or not request.status:
        raise ValidationError("Message ID and status are required")
    if request.status not in set(MessageStatus):
        raise ValidationError("Invalid status")
    message_id = parse_entity_id(MessageId, request.message_id, "message ID")
    try:
        message = await service.set_status(message_id, MessageStatus(request.status))
        return MessageUpdatedResponse(
            message="Status updated successfully",
            updated_message=MessageResponse.from_domain(message),
        )
    except MessageNotFoundError:
        raise NotFoundError("Message not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "message_status_update_failed", message_id=request.message_id, error=str(e)
        )
        raise UnexpectedError("Failed to update status")
