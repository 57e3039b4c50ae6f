"""Inventory presentation layer."""

from inventory.presentation.routes import router

__all__ = ["router"]
