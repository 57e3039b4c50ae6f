"""Fixed-window rate limiting.

Counts requests per key inside fixed windows. Bursts of up to twice the
limit are possible across a window edge, which is acceptable for login
throttling but not for quota enforcement.

The limiter itself holds no state: counters live in a ``RateLimitStore``
and time comes from an injected clock, so both can be replaced in tests
or swapped for a shared cache in multi-instance deployments.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

Clock = Callable[[], float]


@dataclass(frozen=True)
class RateLimitPolicy:
    """A named request budget.

    Attributes:
        name: Preset identifier, part of the counter key
        max_requests: Requests accepted per window
        window_seconds: Window length
    """

    name: str
    max_requests: int
    window_seconds: int


class RateLimitPresets:
    """Budgets used across the API."""

    CONTACT_FORM = RateLimitPolicy("contactForm", max_requests=5, window_seconds=900)
    AUTH = RateLimitPolicy("auth", max_requests=10, window_seconds=900)
    GENERAL = RateLimitPolicy("general", max_requests=100, window_seconds=60)
    PASSWORD_RESET = RateLimitPolicy(
        "passwordReset", max_requests=3, window_seconds=3600
    )


@dataclass
class RateLimitEntry:
    """Counter for one key inside one window."""

    count: int
    window_start: float
    window_seconds: int
    max_count: int

    @property
    def reset_at(self) -> float:
        return self.window_start + self.window_seconds

    def is_expired(self, now: float) -> bool:
        return now >= self.reset_at


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of a rate-limit check.

    Attributes:
        allowed: Whether the request is within budget
        limit: Window budget
        remaining: Requests left in the current window
        reset_at: Epoch seconds (rounded up) when the window resets
        retry_after: Seconds to wait, only set when rejected
    """

    allowed: bool
    limit: int
    remaining: int
    reset_at: int
    retry_after: int | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset_at),
        }


class RateLimitStore(Protocol):
    """Key-value storage for rate-limit counters with expiry."""

    def get(self, key: str) -> RateLimitEntry | None:
        """Return the entry for ``key`` if one exists."""
        ...

    def set(self, key: str, entry: RateLimitEntry, now: float) -> None:
        """Store ``entry`` under ``key``."""
        ...


class InMemoryRateLimitStore:
    """Process-local store; limits are per instance, not global.

    Expired windows are purged at most once per ``cleanup_interval``
    seconds, piggybacking on writes.
    """

    def __init__(self, cleanup_interval: float = 600.0):
        self._entries: dict[str, RateLimitEntry] = {}
        self._cleanup_interval = cleanup_interval
        self._last_cleanup: float | None = None

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> RateLimitEntry | None:
        return self._entries.get(key)

    def set(self, key: str, entry: RateLimitEntry, now: float) -> None:
        self._entries[key] = entry
        if self._last_cleanup is None:
            self._last_cleanup = now
        elif now - self._last_cleanup >= self._cleanup_interval:
            self.purge_expired(now)

    def purge_expired(self, now: float) -> int:
        """Drop every expired entry and return how many were removed."""
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        self._last_cleanup = now
        return len(expired)


class FixedWindowRateLimiter:
    """Fixed-window counter over a ``RateLimitStore``.

    ``check`` performs no I/O and never awaits, so under asyncio each call
    runs to completion without interleaving.
    """

    def __init__(self, store: RateLimitStore, clock: Clock = time.time):
        self._store = store
        self._clock = clock

    def check(self, key: str, limit: int, window_seconds: int) -> RateLimitResult:
        """Count one request against ``key``.

        Args:
            key: Caller identity plus preset name
            limit: Requests accepted per window
            window_seconds: Window length

        Returns:
            The result; ``allowed`` is False once the count exceeds ``limit``
        """
        now = self._clock()
        entry = self._store.get(key)

        if entry is None or entry.is_expired(now):
            entry = RateLimitEntry(
                count=1,
                window_start=now,
                window_seconds=window_seconds,
                max_count=limit,
            )
        else:
            entry.count += 1
        self._store.set(key, entry, now)

        reset_at = math.ceil(entry.reset_at)
        if entry.count > limit:
            return RateLimitResult(
                allowed=False,
                limit=limit,
                remaining=0,
                reset_at=reset_at,
                retry_after=max(1, math.ceil(entry.reset_at - now)),
            )

        return RateLimitResult(
            allowed=True,
            limit=limit,
            remaining=max(0, limit - entry.count),
            reset_at=reset_at,
        )

    def check_policy(self, caller: str, policy: RateLimitPolicy) -> RateLimitResult:
        """Check ``caller`` against a preset, keyed as ``<caller>:<preset>``."""
        return self.check(
            f"{caller}:{policy.name}", policy.max_requests, policy.window_seconds
        )
