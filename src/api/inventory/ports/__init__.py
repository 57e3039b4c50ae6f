"""Ports for the inventory bounded context."""

from inventory.ports.exceptions import InventoryItemNotFoundError
from inventory.ports.repositories import IInventoryRepository

__all__ = ["IInventoryRepository", "InventoryItemNotFoundError"]
