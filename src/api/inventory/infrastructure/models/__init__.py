"""SQLAlchemy ORM models for the inventory bounded context."""

from inventory.infrastructure.models.inventory_item import InventoryItemModel

__all__ = ["InventoryItemModel"]
