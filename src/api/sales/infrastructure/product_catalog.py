"""Catalog view used to price orders.

Reads the catalog's products table directly; sales never writes to it.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.value_objects import ProductStatus
from catalog.infrastructure.models import ProductModel
from sales.ports.repositories import CatalogEntry, IProductCatalog


class ProductCatalog(IProductCatalog):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_sellable(self, product_ids: list[str]) -> dict[str, CatalogEntry]:
        if not product_ids:
            return {}
        stmt = select(ProductModel.id, ProductModel.name, ProductModel.price).where(
            ProductModel.id.in_(set(product_ids)),
            ProductModel.status == ProductStatus.ACTIVE.value,
        )
        result = await self._session.execute(stmt)
        return {
            row.id: CatalogEntry(
                product_id=row.id, name=row.name, price=float(row.price)
            )
            for row in result.all()
        }
