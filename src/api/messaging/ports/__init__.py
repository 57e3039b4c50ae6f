"""Ports for the messaging bounded context."""

from messaging.ports.exceptions import MessageNotFoundError
from messaging.ports.repositories import IMessageRepository

__all__ = ["IMessageRepository", "MessageNotFoundError"]
