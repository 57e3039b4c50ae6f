"""Shared fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from iam.application.value_objects import AuthenticatedIdentity
from iam.domain.value_objects import Role, UserId


@pytest.fixture
def mock_session() -> AsyncMock:
    """Async session whose ``begin()`` works as an async context manager.

    ``__aexit__`` returns False so exceptions raised inside the
    transaction block still propagate.
    """
    session = AsyncMock()
    mock_transaction = MagicMock()
    mock_transaction.__aenter__ = AsyncMock(return_value=None)
    mock_transaction.__aexit__ = AsyncMock(return_value=False)
    session.begin = MagicMock(return_value=mock_transaction)
    return session


@pytest.fixture
def admin_identity() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(
        user_id=UserId.generate(),
        external_id="admin-subject",
        email="admin@example.com",
        name="Admin",
        role=Role.ADMIN,
        email_verified=True,
    )


@pytest.fixture
def customer_identity() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(
        user_id=UserId.generate(),
        external_id="customer-subject",
        email="customer@example.com",
        name="Customer",
        role=Role.CUSTOMER,
        email_verified=False,
    )
