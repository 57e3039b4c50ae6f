"""Unit tests for the role gate."""

import pytest

from iam.application.security import require_authenticated, require_role
from iam.application.value_objects import AuthenticatedIdentity
from iam.domain.value_objects import Role, UserId
from shared_kernel.errors import AuthenticationError, AuthorizationError


def _identity(role: Role) -> AuthenticatedIdentity:
    return AuthenticatedIdentity(
        user_id=UserId.generate(),
        external_id="subject-1",
        email="user@example.com",
        name="User",
        role=role,
        email_verified=True,
    )


class TestRequireAuthenticated:
    def test_returns_identity(self):
        identity = _identity(Role.CUSTOMER)
        assert require_authenticated(identity) is identity

    def test_missing_identity_is_401(self):
        with pytest.raises(AuthenticationError) as exc_info:
            require_authenticated(None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    def test_custom_error_text(self):
        with pytest.raises(AuthenticationError) as exc_info:
            require_authenticated(None, error="You must be logged in to use coupons")

        assert exc_info.value.error == "You must be logged in to use coupons"


class TestRequireRole:
    def test_admin_passes_admin_gate(self):
        identity = _identity(Role.ADMIN)
        assert require_role(identity, Role.ADMIN) is identity

    def test_customer_is_forbidden(self):
        with pytest.raises(AuthorizationError) as exc_info:
            require_role(_identity(Role.CUSTOMER), Role.ADMIN)

        assert exc_info.value.status_code == 403

    def test_anonymous_is_unauthorized(self):
        with pytest.raises(AuthenticationError):
            require_role(None, Role.ADMIN)
