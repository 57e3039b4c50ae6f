"""Application services for the catalog bounded context."""

from catalog.application.services.category_service import CategoryService
from catalog.application.services.hero_banner_service import HeroBannerService
from catalog.application.services.product_service import (
    FEATURED_LIMIT,
    ProductService,
)

__all__ = ["CategoryService", "HeroBannerService", "ProductService", "FEATURED_LIMIT"]
