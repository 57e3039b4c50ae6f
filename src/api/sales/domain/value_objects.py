"""Value objects for the sales domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from shared_kernel.identifiers import EntityId


@dataclass(frozen=True)
class CouponId(EntityId):
    pass


@dataclass(frozen=True)
class OrderId(EntityId):
    pass


class DiscountType(StrEnum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class CouponStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class UsageType(StrEnum):
    """How often one customer may redeem a coupon.

    MULTI_USE allows up to ``max_uses_per_user`` redemptions per email.
    """

    MULTI_USE = "multi_use"
    ONE_PER_USER = "one_per_user"


class OrderStatus(StrEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class CouponRejection(StrEnum):
    """Why a coupon cannot be applied, in the order the checks run."""

    NOT_FOUND = "not_found"
    INACTIVE = "inactive"
    EXPIRED = "expired"
    USAGE_LIMIT_REACHED = "usage_limit_reached"
    ALREADY_USED = "already_used"
    USER_LIMIT_REACHED = "user_limit_reached"
    BELOW_MINIMUM = "below_minimum"


def normalize_coupon_code(code: str) -> str:
    """Coupon codes are case-insensitive and stored upper-cased."""
    return code.strip().upper()
