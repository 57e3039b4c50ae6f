"""PostgreSQL implementation of IProductRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.aggregates import Product
from catalog.domain.value_objects import (
    CategoryId,
    ProductId,
    ProductImage,
    ProductStatus,
    SubcategoryId,
)
from catalog.infrastructure.models import ProductModel
from catalog.ports.repositories import IProductRepository


def _image_to_json(image: ProductImage) -> dict[str, Any]:
    return {"url": image.url, "alt": image.alt, "position": image.position}


def _image_from_json(data: dict[str, Any]) -> ProductImage:
    return ProductImage(
        url=data["url"],
        alt=data.get("alt"),
        position=int(data.get("position", 0)),
    )


class ProductRepository(IProductRepository):
    """PostgreSQL-backed repository for Product aggregates.

    Runs inside the caller's transaction; only flushes, never commits.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, product: Product) -> None:
        model = await self._session.get(ProductModel, product.id.value)
        if model is None:
            model = ProductModel(id=product.id.value)
            self._session.add(model)

        model.name = product.name
        model.slug = product.slug
        model.description = product.description
        model.price = product.price
        model.currency = product.currency
        model.category_id = product.category_id.value
        model.subcategory_id = (
            product.subcategory_id.value if product.subcategory_id else None
        )
        model.status = product.status.value
        model.stock = product.stock
        model.featured = product.featured
        model.images = [_image_to_json(image) for image in product.images]
        await self._session.flush()

    async def get_by_id(self, product_id: ProductId) -> Product | None:
        model = await self._session.get(ProductModel, product_id.value)
        return self._to_domain(model) if model else None

    async def get_by_slug(self, slug: str) -> Product | None:
        stmt = select(ProductModel).where(ProductModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_many(self, product_ids: list[ProductId]) -> list[Product]:
        if not product_ids:
            return []
        stmt = select(ProductModel).where(
            ProductModel.id.in_([product_id.value for product_id in product_ids])
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def search(
        self,
        status: str | None = None,
        category_id: CategoryId | None = None,
        subcategory_id: SubcategoryId | None = None,
        featured: bool | None = None,
        limit: int | None = None,
    ) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.created_at.desc())
        if status is not None:
            stmt = stmt.where(ProductModel.status == status)
        if category_id is not None:
            stmt = stmt.where(ProductModel.category_id == category_id.value)
        if subcategory_id is not None:
            stmt = stmt.where(ProductModel.subcategory_id == subcategory_id.value)
        if featured is not None:
            stmt = stmt.where(ProductModel.featured.is_(featured))
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count_in_category(self, category_id: CategoryId) -> int:
        stmt = select(func.count(ProductModel.id)).where(
            ProductModel.category_id == category_id.value
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def count_in_subcategory(self, subcategory_id: SubcategoryId) -> int:
        stmt = select(func.count(ProductModel.id)).where(
            ProductModel.subcategory_id == subcategory_id.value
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def delete(self, product_id: ProductId) -> bool:
        stmt = delete(ProductModel).where(ProductModel.id == product_id.value)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: ProductModel) -> Product:
        return Product(
            id=ProductId(value=model.id),
            name=model.name,
            slug=model.slug,
            description=model.description,
            price=float(model.price),
            currency=model.currency,
            category_id=CategoryId(value=model.category_id),
            subcategory_id=(
                SubcategoryId(value=model.subcategory_id)
                if model.subcategory_id
                else None
            ),
            status=ProductStatus(model.status),
            stock=model.stock,
            featured=model.featured,
            images=tuple(_image_from_json(data) for data in model.images or []),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
