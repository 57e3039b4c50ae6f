"""PostgreSQL implementation of IInventoryRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.domain.aggregates import InventoryItem
from inventory.domain.value_objects import InventoryItemId
from inventory.infrastructure.models import InventoryItemModel
from inventory.ports.repositories import IInventoryRepository

_FIELDS = (
    "name",
    "category",
    "quantity",
    "unit",
    "low_stock_alert",
    "cost_per_unit",
    "supplier",
    "notes",
)


class InventoryRepository(IInventoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, item: InventoryItem) -> None:
        model = await self._session.get(InventoryItemModel, item.id.value)
        if model is None:
            model = InventoryItemModel(id=item.id.value)
            self._session.add(model)

        for name in _FIELDS:
            setattr(model, name, getattr(item, name))
        await self._session.flush()

    async def get_by_id(self, item_id: InventoryItemId) -> InventoryItem | None:
        model = await self._session.get(InventoryItemModel, item_id.value)
        return self._to_domain(model) if model else None

    async def list_all(self, category: str | None = None) -> list[InventoryItem]:
        stmt = select(InventoryItemModel).order_by(InventoryItemModel.name)
        if category is not None:
            stmt = stmt.where(InventoryItemModel.category == category)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, item_id: InventoryItemId) -> bool:
        stmt = delete(InventoryItemModel).where(
            InventoryItemModel.id == item_id.value
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: InventoryItemModel) -> InventoryItem:
        return InventoryItem(
            id=InventoryItemId(value=model.id),
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in _FIELDS},
        )
