"""Aggregates for the messaging bounded context."""

from messaging.domain.aggregates.message import Message

__all__ = ["Message"]
