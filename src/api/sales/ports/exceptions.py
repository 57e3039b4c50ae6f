"""Domain exceptions for the sales bounded context."""

from sales.domain.aggregates import CouponRejectedError


class CouponNotFoundError(Exception):
    pass


class DuplicateCouponCodeError(Exception):
    """Raised when another coupon already uses the code."""

    pass


class OrderNotFoundError(Exception):
    """Raised when an order does not exist or is not visible to the caller."""

    pass


class InvalidOrderItemError(Exception):
    """Raised when an order line names a product that cannot be sold."""

    pass


__all__ = [
    "CouponNotFoundError",
    "CouponRejectedError",
    "DuplicateCouponCodeError",
    "InvalidOrderItemError",
    "OrderNotFoundError",
]
