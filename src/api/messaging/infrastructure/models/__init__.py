"""SQLAlchemy ORM models for the messaging bounded context."""

from messaging.infrastructure.models.message import MessageModel

__all__ = ["MessageModel"]
