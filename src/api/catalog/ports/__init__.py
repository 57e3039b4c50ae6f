"""Ports for the catalog bounded context."""

from catalog.ports.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateSlugError,
    HeroBannerNotFoundError,
    ProductNotFoundError,
    SubcategoryInUseError,
    SubcategoryNotFoundError,
)
from catalog.ports.repositories import (
    ICategoryRepository,
    IHeroBannerRepository,
    IProductRepository,
    ISubcategoryRepository,
)

__all__ = [
    "CategoryInUseError",
    "CategoryNotFoundError",
    "DuplicateSlugError",
    "HeroBannerNotFoundError",
    "ProductNotFoundError",
    "SubcategoryInUseError",
    "SubcategoryNotFoundError",
    "ICategoryRepository",
    "IHeroBannerRepository",
    "IProductRepository",
    "ISubcategoryRepository",
]
