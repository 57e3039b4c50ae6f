"""Application-layer value objects for the inventory bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from inventory.domain.aggregates import InventoryItem
from shared_kernel.money import round_money


@dataclass(frozen=True)
class InventoryStats:
    """Summary over the whole inventory, independent of list filters."""

    total_items: int
    low_stock_count: int
    total_value: float
    categories_count: int

    @classmethod
    def of(cls, items: list[InventoryItem]) -> InventoryStats:
        return cls(
            total_items=len(items),
            low_stock_count=sum(1 for item in items if item.is_low_stock),
            total_value=round_money(sum(item.stock_value for item in items)),
            categories_count=len({item.category for item in items}),
        )


@dataclass(frozen=True)
class InventoryListing:
    items: list[InventoryItem]
    stats: InventoryStats
