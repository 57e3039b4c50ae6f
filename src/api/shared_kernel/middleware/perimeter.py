"""Security perimeter middleware.

Runs before routing: rejects state-changing API requests whose origin is
not trusted, and stamps the fixed security headers onto every response.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from shared_kernel.errors import CsrfError
from shared_kernel.middleware.observability import (
    DefaultPerimeterProbe,
    PerimeterProbe,
)
from shared_kernel.security import (
    CSRF_HEADERS,
    SECURITY_HEADERS,
    OriginValidator,
    has_bearer_token,
)


class SecurityPerimeterMiddleware(BaseHTTPMiddleware):
    """Origin check plus security headers for the whole application."""

    def __init__(
        self,
        app: ASGIApp,
        validator: OriginValidator,
        probe: PerimeterProbe | None = None,
    ):
        super().__init__(app)
        self._validator = validator
        self._probe = probe or DefaultPerimeterProbe()

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        headers = request.headers
        decision = self._validator.validate(
            method=request.method,
            path=request.url.path,
            origin=headers.get("origin"),
            referer=headers.get("referer"),
            host=headers.get("host"),
            authorization=headers.get("authorization"),
        )

        if not decision.allowed:
            self._probe.csrf_request_blocked(
                method=request.method,
                path=request.url.path,
                origin=headers.get("origin"),
                referer=headers.get("referer"),
                has_auth=has_bearer_token(headers.get("authorization")),
                reason=decision.reason,
            )
            error = CsrfError(reason=decision.reason)
            return JSONResponse(
                status_code=error.status_code,
                content=error.to_body(),
                headers={**SECURITY_HEADERS, **CSRF_HEADERS},
            )

        try:
            response = await call_next(request)
        except Exception as e:
            # Errors escaping here would be rendered outside this middleware.
            self._probe.request_failed(
                method=request.method, path=request.url.path, error=e
            )
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error"},
                headers=SECURITY_HEADERS,
            )

        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response
