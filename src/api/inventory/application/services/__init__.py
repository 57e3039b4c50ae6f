"""Application services for the inventory bounded context."""

from inventory.application.services.inventory_service import InventoryService

__all__ = ["InventoryService"]
