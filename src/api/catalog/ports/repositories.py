"""Repository protocols (ports) for the catalog bounded context.

Implementations never open transactions; the calling service owns them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from catalog.domain.aggregates import Category, HeroBanner, Product, Subcategory
from catalog.domain.value_objects import (
    CategoryId,
    HeroBannerId,
    ProductId,
    SubcategoryId,
)


@runtime_checkable
class ICategoryRepository(Protocol):
    async def save(self, category: Category) -> None: ...

    async def get_by_id(self, category_id: CategoryId) -> Category | None: ...

    async def get_by_slug(self, slug: str) -> Category | None: ...

    async def list_all(self) -> list[Category]:
        """List categories ordered by name."""
        ...

    async def delete(self, category_id: CategoryId) -> bool:
        """Delete a category, returning False when it did not exist."""
        ...


@runtime_checkable
class ISubcategoryRepository(Protocol):
    async def save(self, subcategory: Subcategory) -> None: ...

    async def get_by_id(self, subcategory_id: SubcategoryId) -> Subcategory | None: ...

    async def get_by_slug(
        self, category_id: CategoryId, slug: str
    ) -> Subcategory | None:
        """Retrieve a subcategory by slug within one category."""
        ...

    async def list_all(
        self, category_id: CategoryId | None = None
    ) -> list[Subcategory]:
        """List subcategories ordered by name, optionally for one category."""
        ...

    async def delete(self, subcategory_id: SubcategoryId) -> bool: ...


@runtime_checkable
class IProductRepository(Protocol):
    async def save(self, product: Product) -> None: ...

    async def get_by_id(self, product_id: ProductId) -> Product | None: ...

    async def get_by_slug(self, slug: str) -> Product | None: ...

    async def get_many(self, product_ids: list[ProductId]) -> list[Product]:
        """Retrieve every product whose id is in ``product_ids``."""
        ...

    async def search(
        self,
        status: str | None = None,
        category_id: CategoryId | None = None,
        subcategory_id: SubcategoryId | None = None,
        featured: bool | None = None,
        limit: int | None = None,
    ) -> list[Product]:
        """List products newest first, filtered by the given fields."""
        ...

    async def count_in_category(self, category_id: CategoryId) -> int: ...

    async def count_in_subcategory(self, subcategory_id: SubcategoryId) -> int: ...

    async def delete(self, product_id: ProductId) -> bool: ...


@runtime_checkable
class IHeroBannerRepository(Protocol):
    async def save(self, banner: HeroBanner) -> None: ...

    async def get_by_id(self, banner_id: HeroBannerId) -> HeroBanner | None: ...

    async def list_all(self, active_only: bool = False) -> list[HeroBanner]:
        """List banners ordered by position."""
        ...

    async def delete(self, banner_id: HeroBannerId) -> bool: ...
