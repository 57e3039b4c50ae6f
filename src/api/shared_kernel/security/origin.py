"""Origin-based CSRF validation for state-changing API requests.

Browsers attach ``Origin`` (or at least ``Referer``) to cross-site form
posts and fetches, so comparing those against a fixed allow-list is enough
to reject forged requests. Token-authenticated clients carry no browser
origin and are let through on the strength of their bearer token.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit

STATE_CHANGING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class Origin:
    """Structural origin of a URL: scheme, host and effective port."""

    scheme: str
    host: str
    port: int | None

    @classmethod
    def parse(cls, url: str | None) -> Origin | None:
        """Parse the origin of an absolute URL.

        Returns None for anything that is not an absolute URL with a host,
        including malformed ports.
        """
        if not url:
            return None
        try:
            parts = urlsplit(url.strip())
            port = parts.port
        except ValueError:
            return None
        scheme = parts.scheme.lower()
        if not scheme or not parts.hostname:
            return None
        return cls(
            scheme=scheme,
            host=parts.hostname.lower(),
            port=port if port is not None else _DEFAULT_PORTS.get(scheme),
        )


@dataclass(frozen=True)
class OriginDecision:
    """Outcome of an origin check.

    Attributes:
        allowed: Whether the request may reach its handler
        reason: Why the request was denied (None when allowed)
    """

    allowed: bool
    reason: str | None = None


ALLOW = OriginDecision(allowed=True)


class OriginValidator:
    """Decides whether a request's declared origin is trustworthy.

    The allow-list is the configured application URL, the deployment
    platform URL, the request's own host over http and https, and the
    local development origins.
    """

    def __init__(
        self,
        app_url: str | None = None,
        platform_url: str | None = None,
        dev_origins: Iterable[str] = (),
        api_prefix: str = "/api/",
    ):
        self._static_origins = [
            url for url in (app_url, platform_url, *dev_origins) if url
        ]
        self._api_prefix = api_prefix

    @property
    def static_origins(self) -> list[str]:
        return list(self._static_origins)

    def allowed_origins(self, host: str | None) -> list[str]:
        """Allow-list for a request addressed to ``host``."""
        origins = list(self._static_origins)
        if host:
            origins.append(f"http://{host}")
            origins.append(f"https://{host}")
        return origins

    def requires_check(self, method: str, path: str) -> bool:
        return method.upper() in STATE_CHANGING_METHODS and path.startswith(
            self._api_prefix
        )

    def validate(
        self,
        method: str,
        path: str,
        origin: str | None,
        referer: str | None,
        host: str | None,
        authorization: str | None,
    ) -> OriginDecision:
        """Check one request.

        Args:
            method: HTTP method
            path: Request path
            origin: ``Origin`` header value
            referer: ``Referer`` header value
            host: ``Host`` header value
            authorization: ``Authorization`` header value

        Returns:
            The decision; denials carry a reason for the audit log
        """
        if not self.requires_check(method, path):
            return ALLOW

        allowed = {
            parsed
            for parsed in (Origin.parse(url) for url in self.allowed_origins(host))
            if parsed is not None
        }

        if origin:
            if Origin.parse(origin) in allowed:
                return ALLOW
            return OriginDecision(allowed=False, reason="Invalid origin")

        if referer:
            if Origin.parse(referer) in allowed:
                return ALLOW
            return OriginDecision(allowed=False, reason="Invalid referer")

        if has_bearer_token(authorization):
            return ALLOW

        return OriginDecision(allowed=False, reason="Missing origin and referer")


def has_bearer_token(authorization: str | None) -> bool:
    """True when the header carries ``Bearer <token>`` with a non-empty token."""
    if not authorization:
        return False
    scheme, _, token = authorization.partition(" ")
    return scheme.lower() == "bearer" and bool(token.strip())
