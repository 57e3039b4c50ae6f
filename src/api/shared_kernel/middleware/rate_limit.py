"""Rate-limit dependency for individual routes.

Usage:
    @router.post("/login")
    async def login(
        _: Annotated[RateLimitResult, Depends(RateLimited(RateLimitPresets.AUTH))],
    ): ...
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request, Response

from infrastructure.settings import get_security_settings
from shared_kernel.errors import RateLimitError
from shared_kernel.middleware.observability import (
    DefaultPerimeterProbe,
    PerimeterProbe,
)
from shared_kernel.security import (
    FixedWindowRateLimiter,
    InMemoryRateLimitStore,
    RateLimitPolicy,
    RateLimitResult,
)

UNKNOWN_CALLER = "unknown"


def client_identifier(request: Request) -> str:
    """Best-effort caller IP.

    Prefers the first ``X-Forwarded-For`` hop, then ``X-Real-IP``, then
    ``CF-Connecting-IP``, then the socket peer, else ``unknown``.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop

    for header in ("x-real-ip", "cf-connecting-ip"):
        value = request.headers.get(header)
        if value and value.strip():
            return value.strip()

    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CALLER


@lru_cache
def get_rate_limiter() -> FixedWindowRateLimiter:
    """Application-scoped limiter over a process-local store."""
    settings = get_security_settings()
    store = InMemoryRateLimitStore(
        cleanup_interval=settings.rate_limit_cleanup_interval_seconds
    )
    return FixedWindowRateLimiter(store=store)


def get_perimeter_probe() -> PerimeterProbe:
    return DefaultPerimeterProbe()


class RateLimited:
    """FastAPI dependency enforcing one ``RateLimitPolicy``.

    Accepted requests get ``X-RateLimit-*`` headers; rejected ones raise
    ``RateLimitError`` which also carries ``Retry-After``.
    """

    def __init__(self, policy: RateLimitPolicy):
        self.policy = policy

    async def __call__(
        self,
        request: Request,
        response: Response,
        limiter: Annotated[FixedWindowRateLimiter, Depends(get_rate_limiter)],
        probe: Annotated[PerimeterProbe, Depends(get_perimeter_probe)],
    ) -> RateLimitResult:
        caller = client_identifier(request)
        result = limiter.check_policy(caller, self.policy)

        if not result.allowed:
            retry_after = result.retry_after or 1
            probe.rate_limit_exceeded(
                caller=caller,
                policy=self.policy.name,
                path=request.url.path,
                retry_after=retry_after,
            )
            raise RateLimitError(retry_after=retry_after, headers=result.headers)

        for name, value in result.headers.items():
            response.headers[name] = value
        return result
