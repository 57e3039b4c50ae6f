"""Product and hero banner dependency providers for catalog context."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.observability import CatalogServiceProbe
from catalog.application.services import HeroBannerService, ProductService
from catalog.dependencies.category import (
    get_catalog_service_probe,
    get_category_repository,
    get_product_repository,
    get_subcategory_repository,
)
from catalog.infrastructure.category_repository import (
    CategoryRepository,
    SubcategoryRepository,
)
from catalog.infrastructure.hero_banner_repository import HeroBannerRepository
from catalog.infrastructure.product_repository import ProductRepository
from infrastructure.database.dependencies import get_write_session


def get_product_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    product_repo: Annotated[ProductRepository, Depends(get_product_repository)],
    category_repo: Annotated[CategoryRepository, Depends(get_category_repository)],
    subcategory_repo: Annotated[
        SubcategoryRepository, Depends(get_subcategory_repository)
    ],
    probe: Annotated[CatalogServiceProbe, Depends(get_catalog_service_probe)],
) -> ProductService:
    """Get ProductService instance.

    Returns:
        ProductService instance
    """
    return ProductService(
        session=session,
        product_repository=product_repo,
        category_repository=category_repo,
        subcategory_repository=subcategory_repo,
        probe=probe,
    )


def get_hero_banner_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> HeroBannerRepository:
    return HeroBannerRepository(session=session)


def get_hero_banner_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    banner_repo: Annotated[HeroBannerRepository, Depends(get_hero_banner_repository)],
    probe: Annotated[CatalogServiceProbe, Depends(get_catalog_service_probe)],
) -> HeroBannerService:
    return HeroBannerService(
        session=session, banner_repository=banner_repo, probe=probe
    )
