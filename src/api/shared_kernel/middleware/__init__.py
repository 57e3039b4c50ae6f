"""Shared middleware for cross-cutting concerns.

This module contains the ASGI middleware and FastAPI dependencies shared
across bounded contexts: the security perimeter (origin check and
security headers) and per-route rate limiting.
"""
