"""Fixed security headers attached to every response."""

SECURITY_HEADERS: dict[str, str] = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}

CSRF_HEADERS: dict[str, str] = {
    "X-CSRF-Protection": "active",
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
}
