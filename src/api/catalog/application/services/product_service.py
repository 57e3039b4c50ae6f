"""Product application service."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.observability import (
    CatalogServiceProbe,
    DefaultCatalogServiceProbe,
)
from catalog.domain.aggregates import Product
from catalog.domain.value_objects import (
    CategoryId,
    ProductId,
    ProductStatus,
    SubcategoryId,
)
from catalog.ports.exceptions import (
    CategoryNotFoundError,
    DuplicateSlugError,
    ProductNotFoundError,
    SubcategoryNotFoundError,
)
from catalog.ports.repositories import (
    ICategoryRepository,
    IProductRepository,
    ISubcategoryRepository,
)

FEATURED_LIMIT = 8


class ProductService:
    """Storefront reads and admin writes for products."""

    def __init__(
        self,
        session: AsyncSession,
        product_repository: IProductRepository,
        category_repository: ICategoryRepository,
        subcategory_repository: ISubcategoryRepository,
        probe: CatalogServiceProbe | None = None,
    ):
        self._session = session
        self._products = product_repository
        self._categories = category_repository
        self._subcategories = subcategory_repository
        self._probe = probe or DefaultCatalogServiceProbe()

    async def list_products(
        self,
        category_id: CategoryId | None = None,
        subcategory_id: SubcategoryId | None = None,
        include_hidden: bool = False,
    ) -> list[Product]:
        """List products newest first.

        Storefront callers only see active products; admins pass
        ``include_hidden`` to see drafts and archived ones too.
        """
        async with self._session.begin():
            return await self._products.search(
                status=None if include_hidden else ProductStatus.ACTIVE.value,
                category_id=category_id,
                subcategory_id=subcategory_id,
            )

    async def list_featured(self, limit: int = FEATURED_LIMIT) -> list[Product]:
        async with self._session.begin():
            return await self._products.search(
                status=ProductStatus.ACTIVE.value, featured=True, limit=limit
            )

    async def get_product(
        self, id_or_slug: str, include_hidden: bool = False
    ) -> Product:
        """Load a product by ULID or by slug.

        Raises:
            ProductNotFoundError: If nothing matches, or the product is hidden
                and ``include_hidden`` is False
        """
        try:
            product_id: ProductId | None = ProductId.from_string(id_or_slug)
        except ValueError:
            product_id = None

        async with self._session.begin():
            product = None
            if product_id is not None:
                product = await self._products.get_by_id(product_id)
            if product is None:
                product = await self._products.get_by_slug(id_or_slug)

        if product is None or not (include_hidden or product.is_visible):
            raise ProductNotFoundError(f"Product {id_or_slug} not found")
        return product

    async def create_product(
        self,
        name: str,
        price: float,
        category_id: CategoryId,
        slug: str | None = None,
        **fields: Any,
    ) -> Product:
        """Create a product.

        Raises:
            ValueError: If a field breaks a business rule
            CategoryNotFoundError: If the category does not exist
            SubcategoryNotFoundError: If the subcategory does not exist or
                belongs to another category
            DuplicateSlugError: If another product uses the slug
        """
        product = Product.create(
            name=name, price=price, category_id=category_id, slug=slug, **fields
        )
        async with self._session.begin():
            await self._check_grouping(product.category_id, product.subcategory_id)
            await self._ensure_slug_free(product.slug)
            await self._products.save(product)

        self._probe.product_created(product_id=product.id.value, slug=product.slug)
        return product

    async def update_product(self, product_id: ProductId, **changes: Any) -> Product:
        """Apply a partial update; ``None`` values are ignored.

        Raises:
            ProductNotFoundError: If no product has this id
            ValueError: If a field breaks a business rule
            CategoryNotFoundError: If a new category does not exist
            SubcategoryNotFoundError: If a new subcategory is invalid
            DuplicateSlugError: If another product uses the new slug
        """
        async with self._session.begin():
            product = await self._products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(f"Product {product_id} not found")

            updated = product.updated(**changes)
            if (updated.category_id, updated.subcategory_id) != (
                product.category_id,
                product.subcategory_id,
            ):
                await self._check_grouping(updated.category_id, updated.subcategory_id)
            if updated.slug != product.slug:
                await self._ensure_slug_free(updated.slug)
            await self._products.save(updated)

        self._probe.product_updated(product_id=product_id.value)
        return updated

    async def delete_product(self, product_id: ProductId) -> None:
        async with self._session.begin():
            if not await self._products.delete(product_id):
                raise ProductNotFoundError(f"Product {product_id} not found")
        self._probe.product_deleted(product_id=product_id.value)

    async def _check_grouping(
        self, category_id: CategoryId, subcategory_id: SubcategoryId | None
    ) -> None:
        if await self._categories.get_by_id(category_id) is None:
            raise CategoryNotFoundError(f"Category {category_id} not found")
        if subcategory_id is None:
            return
        subcategory = await self._subcategories.get_by_id(subcategory_id)
        if subcategory is None or subcategory.category_id != category_id:
            raise SubcategoryNotFoundError(
                f"Subcategory {subcategory_id} not found in category {category_id}"
            )

    async def _ensure_slug_free(self, slug: str) -> None:
        if await self._products.get_by_slug(slug) is not None:
            self._probe.slug_conflict(kind="product", slug=slug)
            raise DuplicateSlugError("A product with this slug already exists")
