"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for user service operations.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def identity_provisioned(
        self,
        user_id: str,
        external_id: str,
        was_created: bool,
    ) -> None:
        """Record that a provider subject was linked to a local user."""
        ...

    def identity_provision_failed(self, external_id: str, error: str) -> None:
        """Record that linking a provider subject failed."""
        ...

    def users_listed(self, page: int, count: int, total: int) -> None:
        """Record that a page of users was listed."""
        ...

    def user_role_changed(self, user_id: str, old_role: str, new_role: str) -> None:
        """Record that an admin changed a user's role."""
        ...

    def user_profile_updated(self, user_id: str) -> None:
        """Record that an admin updated a user's profile."""
        ...

    def user_not_found(self, user_id: str) -> None:
        """Record that a user lookup by id failed."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def identity_provisioned(
        self,
        user_id: str,
        external_id: str,
        was_created: bool,
    ) -> None:
        """Record that a provider subject was linked to a local user."""
        self._logger.info(
            "identity_provisioned",
            user_id=user_id,
            external_id=external_id,
            was_created=was_created,
        )

    def identity_provision_failed(self, external_id: str, error: str) -> None:
        """Record that linking a provider subject failed."""
        self._logger.error(
            "identity_provision_failed",
            external_id=external_id,
            error=error,
        )

    def users_listed(self, page: int, count: int, total: int) -> None:
        self._logger.debug("users_listed", page=page, count=count, total=total)

    def user_role_changed(self, user_id: str, old_role: str, new_role: str) -> None:
        self._logger.info(
            "user_role_changed",
            user_id=user_id,
            old_role=old_role,
            new_role=new_role,
        )

    def user_profile_updated(self, user_id: str) -> None:
        self._logger.info("user_profile_updated", user_id=user_id)

    def user_not_found(self, user_id: str) -> None:
        self._logger.debug("user_not_found", user_id=user_id)
