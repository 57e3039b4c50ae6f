"""Category application service.

Manages categories and their subcategories. Both share the rule that a
grouping cannot be deleted while products still reference it.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.observability import (
    CatalogServiceProbe,
    DefaultCatalogServiceProbe,
)
from catalog.domain.aggregates import Category, Subcategory
from catalog.domain.value_objects import CategoryId, SubcategoryId, slugify
from catalog.ports.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateSlugError,
    SubcategoryInUseError,
    SubcategoryNotFoundError,
)
from catalog.ports.repositories import (
    ICategoryRepository,
    IProductRepository,
    ISubcategoryRepository,
)


class CategoryService:
    """Application service for category and subcategory management."""

    def __init__(
        self,
        session: AsyncSession,
        category_repository: ICategoryRepository,
        subcategory_repository: ISubcategoryRepository,
        product_repository: IProductRepository,
        probe: CatalogServiceProbe | None = None,
    ):
        self._session = session
        self._categories = category_repository
        self._subcategories = subcategory_repository
        self._products = product_repository
        self._probe = probe or DefaultCatalogServiceProbe()

    async def list_categories(self) -> list[Category]:
        async with self._session.begin():
            return await self._categories.list_all()

    async def get_category(self, category_id: CategoryId) -> Category:
        """Load one category.

        Raises:
            CategoryNotFoundError: If no category has this id
        """
        async with self._session.begin():
            category = await self._categories.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category {category_id} not found")
        return category

    async def create_category(
        self,
        name: str,
        slug: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> Category:
        """Create a category.

        Raises:
            ValueError: If the name is blank
            DuplicateSlugError: If another category uses the slug
        """
        category = Category.create(
            name=name, slug=slug, description=description, image=image
        )
        async with self._session.begin():
            await self._ensure_category_slug_free(category.slug)
            await self._categories.save(category)

        self._probe.category_created(category_id=category.id.value, slug=category.slug)
        return category

    async def update_category(
        self,
        category_id: CategoryId,
        name: str | None = None,
        slug: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> Category:
        """Update the provided category fields.

        Raises:
            CategoryNotFoundError: If no category has this id
            DuplicateSlugError: If another category uses the new slug
        """
        async with self._session.begin():
            category = await self._categories.get_by_id(category_id)
            if category is None:
                raise CategoryNotFoundError(f"Category {category_id} not found")

            updated = category.updated(
                name=name, slug=slug, description=description, image=image
            )
            if updated.slug != category.slug:
                await self._ensure_category_slug_free(updated.slug)
            await self._categories.save(updated)

        self._probe.category_updated(category_id=category_id.value)
        return updated

    async def delete_category(self, category_id: CategoryId) -> None:
        """Delete a category that no product references.

        Raises:
            CategoryNotFoundError: If no category has this id
            CategoryInUseError: If products still reference it
        """
        async with self._session.begin():
            product_count = await self._products.count_in_category(category_id)
            if product_count > 0:
                self._probe.category_delete_blocked(
                    category_id=category_id.value, product_count=product_count
                )
                raise CategoryInUseError(
                    "Cannot delete category with existing products"
                )
            if not await self._categories.delete(category_id):
                raise CategoryNotFoundError(f"Category {category_id} not found")

        self._probe.category_deleted(category_id=category_id.value)

    async def list_subcategories(
        self, category_id: CategoryId | None = None
    ) -> list[Subcategory]:
        async with self._session.begin():
            return await self._subcategories.list_all(category_id=category_id)

    async def get_subcategory(self, subcategory_id: SubcategoryId) -> Subcategory:
        async with self._session.begin():
            subcategory = await self._subcategories.get_by_id(subcategory_id)
        if subcategory is None:
            raise SubcategoryNotFoundError(f"Subcategory {subcategory_id} not found")
        return subcategory

    async def create_subcategory(
        self,
        category_id: CategoryId,
        name: str,
        slug: str,
        description: str | None = None,
        image: str | None = None,
    ) -> Subcategory:
        """Create a subcategory under an existing category.

        Raises:
            CategoryNotFoundError: If the parent category does not exist
            DuplicateSlugError: If the slug is taken within the category
        """
        subcategory = Subcategory.create(
            category_id=category_id,
            name=name,
            slug=slug,
            description=description,
            image=image,
        )
        async with self._session.begin():
            if await self._categories.get_by_id(category_id) is None:
                raise CategoryNotFoundError(f"Category {category_id} not found")
            await self._ensure_subcategory_slug_free(category_id, subcategory.slug)
            await self._subcategories.save(subcategory)

        self._probe.subcategory_created(
            subcategory_id=subcategory.id.value,
            category_id=category_id.value,
            slug=subcategory.slug,
        )
        return subcategory

    async def update_subcategory(
        self,
        subcategory_id: SubcategoryId,
        category_id: CategoryId | None = None,
        name: str | None = None,
        slug: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> Subcategory:
        """Update the provided subcategory fields.

        Raises:
            SubcategoryNotFoundError: If no subcategory has this id
            CategoryNotFoundError: If a new parent category does not exist
            DuplicateSlugError: If the slug is taken within the category
        """
        async with self._session.begin():
            subcategory = await self._subcategories.get_by_id(subcategory_id)
            if subcategory is None:
                raise SubcategoryNotFoundError(
                    f"Subcategory {subcategory_id} not found"
                )
            if (
                category_id is not None
                and category_id != subcategory.category_id
                and await self._categories.get_by_id(category_id) is None
            ):
                raise CategoryNotFoundError(f"Category {category_id} not found")

            updated = subcategory.updated(
                category_id=category_id,
                name=name,
                slug=slug,
                description=description,
                image=image,
            )
            if (updated.category_id, updated.slug) != (
                subcategory.category_id,
                subcategory.slug,
            ):
                await self._ensure_subcategory_slug_free(
                    updated.category_id, updated.slug
                )
            await self._subcategories.save(updated)

        self._probe.subcategory_updated(subcategory_id=subcategory_id.value)
        return updated

    async def delete_subcategory(self, subcategory_id: SubcategoryId) -> None:
        """Delete a subcategory that no product references.

        Raises:
            SubcategoryNotFoundError: If no subcategory has this id
            SubcategoryInUseError: If products still reference it
        """
        async with self._session.begin():
            if await self._subcategories.get_by_id(subcategory_id) is None:
                raise SubcategoryNotFoundError(
                    f"Subcategory {subcategory_id} not found"
                )
            product_count = await self._products.count_in_subcategory(subcategory_id)
            if product_count > 0:
                self._probe.subcategory_delete_blocked(
                    subcategory_id=subcategory_id.value, product_count=product_count
                )
                raise SubcategoryInUseError(
                    "Cannot delete subcategory with existing products"
                )
            await self._subcategories.delete(subcategory_id)

        self._probe.subcategory_deleted(subcategory_id=subcategory_id.value)

    async def _ensure_category_slug_free(self, slug: str) -> None:
        if await self._categories.get_by_slug(slug) is not None:
            self._probe.slug_conflict(kind="category", slug=slug)
            raise DuplicateSlugError("A category with this slug already exists")

    async def _ensure_subcategory_slug_free(
        self, category_id: CategoryId, slug: str
    ) -> None:
        if await self._subcategories.get_by_slug(category_id, slugify(slug)):
            self._probe.slug_conflict(kind="subcategory", slug=slug)
            raise DuplicateSlugError(
                "A subcategory with this slug already exists in this category"
            )
