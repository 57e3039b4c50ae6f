"""PostgreSQL implementations of the category and subcategory repositories."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.aggregates import Category, Subcategory
from catalog.domain.value_objects import CategoryId, SubcategoryId
from catalog.infrastructure.models import CategoryModel, SubcategoryModel
from catalog.ports.repositories import ICategoryRepository, ISubcategoryRepository


class CategoryRepository(ICategoryRepository):
    """Runs inside the caller's transaction; only flushes, never commits."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, category: Category) -> None:
        model = await self._session.get(CategoryModel, category.id.value)
        if model is None:
            model = CategoryModel(id=category.id.value)
            self._session.add(model)

        model.name = category.name
        model.slug = category.slug
        model.description = category.description
        model.image = category.image
        await self._session.flush()

    async def get_by_id(self, category_id: CategoryId) -> Category | None:
        model = await self._session.get(CategoryModel, category_id.value)
        return self._to_domain(model) if model else None

    async def get_by_slug(self, slug: str) -> Category | None:
        stmt = select(CategoryModel).where(CategoryModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, category_id: CategoryId) -> bool:
        stmt = delete(CategoryModel).where(CategoryModel.id == category_id.value)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: CategoryModel) -> Category:
        return Category(
            id=CategoryId(value=model.id),
            name=model.name,
            slug=model.slug,
            description=model.description,
            image=model.image,
            created_at=model.created_at,
        )


class SubcategoryRepository(ISubcategoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, subcategory: Subcategory) -> None:
        model = await self._session.get(SubcategoryModel, subcategory.id.value)
        if model is None:
            model = SubcategoryModel(id=subcategory.id.value)
            self._session.add(model)

        model.category_id = subcategory.category_id.value
        model.name = subcategory.name
        model.slug = subcategory.slug
        model.description = subcategory.description
        model.image = subcategory.image
        await self._session.flush()

    async def get_by_id(self, subcategory_id: SubcategoryId) -> Subcategory | None:
        model = await self._session.get(SubcategoryModel, subcategory_id.value)
        return self._to_domain(model) if model else None

    async def get_by_slug(
        self, category_id: CategoryId, slug: str
    ) -> Subcategory | None:
        stmt = select(SubcategoryModel).where(
            SubcategoryModel.category_id == category_id.value,
            SubcategoryModel.slug == slug,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_all(
        self, category_id: CategoryId | None = None
    ) -> list[Subcategory]:
        stmt = select(SubcategoryModel).order_by(SubcategoryModel.name)
        if category_id is not None:
            stmt = stmt.where(SubcategoryModel.category_id == category_id.value)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, subcategory_id: SubcategoryId) -> bool:
        stmt = delete(SubcategoryModel).where(
            SubcategoryModel.id == subcategory_id.value
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: SubcategoryModel) -> Subcategory:
        return Subcategory(
            id=SubcategoryId(value=model.id),
            category_id=CategoryId(value=model.category_id),
            name=model.name,
            slug=model.slug,
            description=model.description,
            image=model.image,
            created_at=model.created_at,
        )
