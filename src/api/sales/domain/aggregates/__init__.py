"""Aggregates for the sales bounded context."""

from sales.domain.aggregates.coupon import (
    DEFAULT_USAGE_LIMIT,
    Coupon,
    CouponQuote,
    CouponRejectedError,
)
from sales.domain.aggregates.order import (
    Order,
    OrderItem,
    generate_order_number,
)

__all__ = [
    "Coupon",
    "CouponQuote",
    "CouponRejectedError",
    "DEFAULT_USAGE_LIMIT",
    "Order",
    "OrderItem",
    "generate_order_number",
]
