"""Category dependency providers for catalog context."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.observability import (
    CatalogServiceProbe,
    DefaultCatalogServiceProbe,
)
from catalog.application.services import CategoryService
from catalog.infrastructure.category_repository import (
    CategoryRepository,
    SubcategoryRepository,
)
from catalog.infrastructure.product_repository import ProductRepository
from infrastructure.database.dependencies import get_write_session


def get_catalog_service_probe() -> CatalogServiceProbe:
    """Get CatalogServiceProbe instance.

    Returns:
        DefaultCatalogServiceProbe instance for observability
    """
    return DefaultCatalogServiceProbe()


def get_category_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> CategoryRepository:
    return CategoryRepository(session=session)


def get_subcategory_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> SubcategoryRepository:
    return SubcategoryRepository(session=session)


def get_product_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> ProductRepository:
    return ProductRepository(session=session)


def get_category_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    category_repo: Annotated[CategoryRepository, Depends(get_category_repository)],
    subcategory_repo: Annotated[
        SubcategoryRepository, Depends(get_subcategory_repository)
    ],
    product_repo: Annotated[ProductRepository, Depends(get_product_repository)],
    probe: Annotated[CatalogServiceProbe, Depends(get_catalog_service_probe)],
) -> CategoryService:
    """Get CategoryService instance.

    All repositories share the request session via FastAPI dependency caching.

    Returns:
        CategoryService instance
    """
    return CategoryService(
        session=session,
        category_repository=category_repo,
        subcategory_repository=subcategory_repo,
        product_repository=product_repo,
        probe=probe,
    )
