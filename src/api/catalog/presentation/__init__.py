"""Catalog presentation layer.

One package per aggregate (categories, products, hero banners), each with
its own routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from catalog.presentation.categories.routes import router as categories_router
from catalog.presentation.hero_banners.routes import router as hero_banners_router
from catalog.presentation.products.routes import router as products_router

router = APIRouter()

router.include_router(categories_router)
router.include_router(products_router)
router.include_router(hero_banners_router)

__all__ = ["router"]
