"""Request and response models for authentication endpoints."""

from __future__ import annotations

from pydantic import Field

from iam.application.value_objects import AuthenticatedIdentity
from iam.ports.identity_provider import ProviderSession
from shared_kernel.api_models import APIModel


class LoginRequest(APIModel):
    """Email and password sign-in.

    Attributes:
        email: Account email
        password: Account password (never logged)
    """

    email: str = Field(..., min_length=1, description="Account email")
    password: str = Field(..., min_length=1, description="Account password")


class IdentityResponse(APIModel):
    """The caller as seen by the API."""

    id: str = Field(..., description="Local user ID (ULID)")
    email: str
    name: str
    role: str = Field(..., description="admin or customer")
    email_verified: bool

    @classmethod
    def from_identity(cls, identity: AuthenticatedIdentity) -> IdentityResponse:
        return cls(
            id=identity.user_id.value,
            email=identity.email,
            name=identity.name,
            role=identity.role.value,
            email_verified=identity.email_verified,
        )


class SessionResponse(APIModel):
    """Provider tokens handed back to the client."""

    access_token: str
    token_type: str
    expires_in: int | None = None
    refresh_token: str | None = None

    @classmethod
    def from_session(cls, session: ProviderSession) -> SessionResponse:
        return cls(
            access_token=session.access_token,
            token_type=session.token_type,
            expires_in=session.expires_in,
            refresh_token=session.refresh_token,
        )


class LoginData(APIModel):
    user: IdentityResponse
    session: SessionResponse


class LoginResponse(APIModel):
    data: LoginData


class LogoutResponse(APIModel):
    message: str


class CurrentUserResponse(APIModel):
    """Current identity, ``null`` when the caller is anonymous."""

    user: IdentityResponse | None
