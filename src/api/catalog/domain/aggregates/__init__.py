"""Aggregates for the catalog bounded context."""

from catalog.domain.aggregates.category import Category, Subcategory
from catalog.domain.aggregates.hero_banner import HeroBanner
from catalog.domain.aggregates.product import DEFAULT_CURRENCY, Product

__all__ = ["Category", "Subcategory", "Product", "HeroBanner", "DEFAULT_CURRENCY"]
