"""Ports for the sales bounded context."""

from sales.ports.exceptions import (
    CouponNotFoundError,
    CouponRejectedError,
    DuplicateCouponCodeError,
    InvalidOrderItemError,
    OrderNotFoundError,
)
from sales.ports.repositories import (
    CatalogEntry,
    ICouponRepository,
    IOrderRepository,
    IProductCatalog,
)

__all__ = [
    "CatalogEntry",
    "CouponNotFoundError",
    "CouponRejectedError",
    "DuplicateCouponCodeError",
    "ICouponRepository",
    "IOrderRepository",
    "IProductCatalog",
    "InvalidOrderItemError",
    "OrderNotFoundError",
]
