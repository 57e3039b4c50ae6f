"""Application services for the sales bounded context."""

from sales.application.services.coupon_service import CouponService
from sales.application.services.order_service import (
    Customer,
    OrderLine,
    OrderService,
)

__all__ = ["CouponService", "Customer", "OrderLine", "OrderService"]
