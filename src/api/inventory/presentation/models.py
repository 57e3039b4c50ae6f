"""Request and response models for inventory endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from inventory.application.value_objects import InventoryListing, InventoryStats
from inventory.domain.aggregates import InventoryItem
from shared_kernel.api_models import APIModel


class CreateInventoryItemRequest(APIModel):
    """Request to create an inventory item.

    Attributes:
        name: Item name (required)
        category: Grouping label, default "General"
        quantity: Units on hand, default 0
        unit: Unit of measure, default "pcs"
        low_stock_alert: Quantity at or below which the item is low, default 5
        cost_per_unit: Optional unit cost used for the stock value
    """

    name: str | None = None
    category: str | None = Field(default=None, max_length=100)
    quantity: int | None = Field(default=None, ge=0)
    unit: str | None = Field(default=None, max_length=32)
    low_stock_alert: int | None = Field(default=None, ge=0)
    cost_per_unit: float | None = Field(default=None, ge=0)
    supplier: str | None = None
    notes: str | None = None


class UpdateInventoryItemRequest(APIModel):
    """Partial update; only fields present in the body change."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, max_length=100)
    quantity: int | None = Field(default=None, ge=0)
    unit: str | None = Field(default=None, max_length=32)
    low_stock_alert: int | None = Field(default=None, ge=0)
    cost_per_unit: float | None = Field(default=None, ge=0)
    supplier: str | None = None
    notes: str | None = None


class AdjustQuantityRequest(APIModel):
    delta: int = Field(..., description="Positive restocks, negative consumes")


class InventoryItemResponse(APIModel):
    id: str
    name: str
    category: str
    quantity: int
    unit: str
    low_stock_alert: int
    cost_per_unit: float | None = None
    supplier: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, item: InventoryItem) -> InventoryItemResponse:
        return cls(
            id=item.id.value,
            name=item.name,
            category=item.category,
            quantity=item.quantity,
            unit=item.unit,
            low_stock_alert=item.low_stock_alert,
            cost_per_unit=item.cost_per_unit,
            supplier=item.supplier,
            notes=item.notes,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class InventoryStatsResponse(APIModel):
    total_items: int
    low_stock_count: int
    total_value: float
    categories_count: int

    @classmethod
    def from_stats(cls, stats: InventoryStats) -> InventoryStatsResponse:
        return cls(
            total_items=stats.total_items,
            low_stock_count=stats.low_stock_count,
            total_value=stats.total_value,
            categories_count=stats.categories_count,
        )


class InventoryListResponse(APIModel):
    items: list[InventoryItemResponse]
    stats: InventoryStatsResponse

    @classmethod
    def from_listing(cls, listing: InventoryListing) -> InventoryListResponse:
        return cls(
            items=[InventoryItemResponse.from_domain(item) for item in listing.items],
            stats=InventoryStatsResponse.from_stats(listing.stats),
        )
