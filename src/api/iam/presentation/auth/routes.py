"""Sign-in, sign-out and current-identity routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from iam.application.observability import AuthenticationProbe
from iam.application.services import BearerAuthenticator
from iam.dependencies.authentication import (
    get_authentication_probe,
    get_identity_provider,
)
from iam.dependencies.user import OptionalIdentity, get_authenticator
from iam.ports.exceptions import (
    ProviderAuthenticationError,
    ProviderUnavailableError,
)
from iam.ports.identity_provider import IIdentityProvider
from iam.presentation.auth.models import (
    CurrentUserResponse,
    IdentityResponse,
    LoginData,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionResponse,
)
from shared_kernel.errors import UnexpectedError, ValidationError
from shared_kernel.middleware.rate_limit import RateLimited
from shared_kernel.security import RateLimitPresets, RateLimitResult

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Sign in with email and password",
    description="""
Exchange email and password for provider tokens.

Limited to 10 attempts per 15 minutes per caller. Every response carries
`X-RateLimit-*` headers; rejected attempts return 429 with `Retry-After`.
""",
    responses={
        200: {"description": "Signed in"},
        400: {"description": "Invalid login credentials"},
        429: {"description": "Too many sign-in attempts"},
        500: {"description": "Internal server error"},
    },
)
async def login(
    request: LoginRequest,
    _: Annotated[RateLimitResult, Depends(RateLimited(RateLimitPresets.AUTH))],
    provider: Annotated[IIdentityProvider, Depends(get_identity_provider)],
    authenticator: Annotated[BearerAuthenticator, Depends(get_authenticator)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> LoginResponse:
    """Sign in and return the caller's identity with the provider session."""
    try:
        session = await provider.sign_in_with_password(
            email=request.email.strip(), password=request.password
        )
    except ProviderAuthenticationError as e:
        probe.sign_in_failed(reason=str(e))
        raise ValidationError("Invalid login credentials")
    except ProviderUnavailableError as e:
        probe.sign_in_failed(reason=str(e))
        raise UnexpectedError()

    identity = await authenticator.verify(session.access_token)
    if identity is None:
        probe.sign_in_failed(reason="issued token could not be verified")
        raise UnexpectedError()

    probe.sign_in_succeeded(user_id=identity.user_id.value)
    return LoginResponse(
        data=LoginData(
            user=IdentityResponse.from_identity(identity),
            session=SessionResponse.from_session(session),
        )
    )


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Sign out",
    description="Tokens are held by the client; the API keeps no session state.",
)
async def logout() -> LogoutResponse:
    return LogoutResponse(message="Logged out successfully")


@router.get(
    "/user",
    response_model=CurrentUserResponse,
    summary="Get the current identity",
    responses={200: {"description": "The identity, or null when anonymous"}},
)
async def get_current_user(identity: OptionalIdentity) -> CurrentUserResponse:
    if identity is None:
        return CurrentUserResponse(user=None)
    return CurrentUserResponse(user=IdentityResponse.from_identity(identity))
