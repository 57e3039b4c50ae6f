"""Inventory application service."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from inventory.application.observability import (
    DefaultInventoryServiceProbe,
    InventoryServiceProbe,
)
from inventory.application.value_objects import InventoryListing, InventoryStats
from inventory.domain.aggregates import InventoryItem
from inventory.domain.value_objects import InventoryItemId
from inventory.ports.exceptions import InventoryItemNotFoundError
from inventory.ports.repositories import IInventoryRepository


class InventoryService:
    """Application service for back-office inventory."""

    def __init__(
        self,
        session: AsyncSession,
        inventory_repository: IInventoryRepository,
        probe: InventoryServiceProbe | None = None,
    ):
        self._session = session
        self._items = inventory_repository
        self._probe = probe or DefaultInventoryServiceProbe()

    async def list_items(
        self, category: str | None = None, low_stock_only: bool = False
    ) -> InventoryListing:
        """List items by name with stats computed over every item.

        Args:
            category: Only return items in this category
            low_stock_only: Only return items at or below their alert level
        """
        async with self._session.begin():
            every_item = await self._items.list_all()

        items = [
            item
            for item in every_item
            if (category is None or item.category == category)
            and (not low_stock_only or item.is_low_stock)
        ]
        return InventoryListing(items=items, stats=InventoryStats.of(every_item))

    async def create_item(self, name: str | None, **fields: Any) -> InventoryItem:
        """Create an item.

        Raises:
            ValueError: If the name is missing or a number is negative
        """
        if not name or not name.strip():
            raise ValueError("Name is required")
        item = InventoryItem.create(name=name, **fields)
        async with self._session.begin():
            await self._items.save(item)

        self._probe.item_created(item_id=item.id.value, name=item.name)
        return item

    async def update_item(
        self, item_id: InventoryItemId, **changes: Any
    ) -> InventoryItem:
        """Apply the given fields; omitted fields keep their value.

        Raises:
            InventoryItemNotFoundError: If no item has this id
            ValueError: If a field breaks a business rule
        """
        async with self._session.begin():
            item = await self._items.get_by_id(item_id)
            if item is None:
                raise InventoryItemNotFoundError(f"Inventory item {item_id} not found")
            updated = item.updated(**changes)
            await self._items.save(updated)

        self._probe.item_updated(item_id=item_id.value)
        return updated

    async def adjust_quantity(
        self, item_id: InventoryItemId, delta: int
    ) -> InventoryItem:
        """Restock (positive delta) or consume (negative), clamped at zero.

        Raises:
            InventoryItemNotFoundError: If no item has this id
        """
        async with self._session.begin():
            item = await self._items.get_by_id(item_id)
            if item is None:
                raise InventoryItemNotFoundError(f"Inventory item {item_id} not found")
            adjusted = item.adjusted(delta)
            await self._items.save(adjusted)

        self._probe.quantity_adjusted(
            item_id=item_id.value,
            delta=delta,
            quantity=adjusted.quantity,
            low_stock=adjusted.is_low_stock,
        )
        return adjusted

    async def delete_item(self, item_id: InventoryItemId) -> None:
        async with self._session.begin():
            if not await self._items.delete(item_id):
                raise InventoryItemNotFoundError(f"Inventory item {item_id} not found")
        self._probe.item_deleted(item_id=item_id.value)
