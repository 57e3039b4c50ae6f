"""Sales presentation layer.

``coupons`` (validation and admin management) and ``orders`` (placement,
history and fulfilment), each with its own routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from sales.presentation.coupons.routes import router as coupons_router
from sales.presentation.orders.routes import router as orders_router

router = APIRouter()

router.include_router(coupons_router)
router.include_router(orders_router)

__all__ = ["router"]
