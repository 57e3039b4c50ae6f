"""HTTP error taxonomy shared by every bounded context.

Each error is an ``HTTPException`` so FastAPI propagates it with the right
status code; ``infrastructure.errors`` renders it as
``{"error": ..., "message"?: ...}``.
"""

from __future__ import annotations

from collections.abc import Mapping

from fastapi import HTTPException, status


class WebMallHTTPError(HTTPException):
    """Base class for taxonomy errors.

    Attributes:
        error: Short error string returned in the ``error`` field
        message: Optional display message returned in the ``message`` field
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error: str = "Internal server error"

    def __init__(
        self,
        error: str | None = None,
        message: str | None = None,
        headers: Mapping[str, str] | None = None,
    ):
        self.error = error or self.default_error
        self.message = message
        super().__init__(
            status_code=type(self).status_code,
            detail=self.error,
            headers=dict(headers) if headers else None,
        )

    def to_body(self) -> dict[str, str]:
        body = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        return body


class AuthenticationError(WebMallHTTPError):
    """Missing, invalid or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_error = "Unauthorized"


class AuthorizationError(WebMallHTTPError):
    """Authenticated caller lacks the required role."""

    status_code = status.HTTP_403_FORBIDDEN
    default_error = "Forbidden"


class ValidationError(WebMallHTTPError):
    """Missing or out-of-range request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_error = "Invalid request"


class NotFoundError(WebMallHTTPError):
    status_code = status.HTTP_404_NOT_FOUND
    default_error = "Not found"


class RateLimitError(WebMallHTTPError):
    """Caller exhausted its fixed-window budget."""

    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_error = "Too many requests"

    def __init__(self, retry_after: int, headers: Mapping[str, str] | None = None):
        self.retry_after = retry_after
        merged = {**(headers or {}), "Retry-After": str(retry_after)}
        super().__init__(
            message=(
                f"Rate limit exceeded. Please try again in {retry_after} seconds."
            ),
            headers=merged,
        )


class CsrfError(WebMallHTTPError):
    """State-changing request from an untrusted origin."""

    status_code = status.HTTP_403_FORBIDDEN
    default_error = "CSRF validation failed"

    def __init__(self, reason: str | None = None):
        self.reason = reason
        super().__init__(
            message="This request appears to be from an unauthorized source",
            headers={"X-CSRF-Protection": "active"},
        )


class UnexpectedError(WebMallHTTPError):
    """Anything else; the display text never carries exception details."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error = "Internal server error"
