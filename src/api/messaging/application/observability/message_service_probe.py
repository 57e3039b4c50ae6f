"""Protocol for messaging service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class MessageServiceProbe(Protocol):
    """Domain probe for contact messages."""

    def message_received(self, message_id: str, signed_in: bool) -> None:
        """Record a contact-form submission. The email is never logged."""
        ...

    def message_replied(self, message_id: str, replied_by: str) -> None: ...

    def message_status_changed(self, message_id: str, status: str) -> None: ...

    def message_read_by_owner(self, message_id: str, user_id: str) -> None: ...


class DefaultMessageServiceProbe:
    """Default implementation of MessageServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def message_received(self, message_id: str, signed_in: bool) -> None:
        self._logger.info(
            "message_received", message_id=message_id, signed_in=signed_in
        )

    def message_replied(self, message_id: str, replied_by: str) -> None:
        self._logger.info(
            "message_replied", message_id=message_id, replied_by=replied_by
        )

    def message_status_changed(self, message_id: str, status: str) -> None:
        self._logger.info(
            "message_status_changed", message_id=message_id, status=status
        )

    def message_read_by_owner(self, message_id: str, user_id: str) -> None:
        self._logger.debug(
            "message_read_by_owner", message_id=message_id, user_id=user_id
        )
