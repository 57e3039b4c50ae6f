"""SQLAlchemy ORM models for the catalog bounded context."""

from catalog.infrastructure.models.category import CategoryModel, SubcategoryModel
from catalog.infrastructure.models.hero_banner import HeroBannerModel
from catalog.infrastructure.models.product import ProductModel

__all__ = ["CategoryModel", "SubcategoryModel", "ProductModel", "HeroBannerModel"]
