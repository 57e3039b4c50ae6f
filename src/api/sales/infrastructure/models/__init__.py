"""SQLAlchemy ORM models for the sales bounded context."""

from sales.infrastructure.models.coupon import CouponModel, CouponUsageModel
from sales.infrastructure.models.order import OrderItemModel, OrderModel

__all__ = ["CouponModel", "CouponUsageModel", "OrderModel", "OrderItemModel"]
