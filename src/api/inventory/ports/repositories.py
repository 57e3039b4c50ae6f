"""Repository protocols (ports) for the inventory bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from inventory.domain.aggregates import InventoryItem
from inventory.domain.value_objects import InventoryItemId


@runtime_checkable
class IInventoryRepository(Protocol):
    async def save(self, item: InventoryItem) -> None: ...

    async def get_by_id(self, item_id: InventoryItemId) -> InventoryItem | None: ...

    async def list_all(self, category: str | None = None) -> list[InventoryItem]:
        """List items ordered by name, optionally within one category."""
        ...

    async def delete(self, item_id: InventoryItemId) -> bool: ...
