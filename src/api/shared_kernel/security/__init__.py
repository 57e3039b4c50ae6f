"""Request perimeter building blocks: origin checks, headers, rate limiting."""

from shared_kernel.security.headers import CSRF_HEADERS, SECURITY_HEADERS
from shared_kernel.security.origin import (
    Origin,
    OriginDecision,
    OriginValidator,
    has_bearer_token,
)
from shared_kernel.security.rate_limit import (
    FixedWindowRateLimiter,
    InMemoryRateLimitStore,
    RateLimitEntry,
    RateLimitPolicy,
    RateLimitPresets,
    RateLimitResult,
    RateLimitStore,
)

__all__ = [
    "CSRF_HEADERS",
    "SECURITY_HEADERS",
    "FixedWindowRateLimiter",
    "InMemoryRateLimitStore",
    "Origin",
    "OriginDecision",
    "OriginValidator",
    "RateLimitEntry",
    "RateLimitPolicy",
    "RateLimitPresets",
    "RateLimitResult",
    "RateLimitStore",
    "has_bearer_token",
]
