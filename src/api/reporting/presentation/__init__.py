"""Reporting presentation layer."""

from reporting.presentation.routes import router

__all__ = ["router"]
