"""Application services for the messaging bounded context."""

from messaging.application.services.message_service import MessageService

__all__ = ["MessageService"]
