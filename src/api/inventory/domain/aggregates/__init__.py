"""Aggregates for the inventory bounded context."""

from inventory.domain.aggregates.inventory_item import (
    DEFAULT_CATEGORY,
    DEFAULT_LOW_STOCK_ALERT,
    DEFAULT_UNIT,
    InventoryItem,
)

__all__ = [
    "InventoryItem",
    "DEFAULT_CATEGORY",
    "DEFAULT_UNIT",
    "DEFAULT_LOW_STOCK_ALERT",
]
