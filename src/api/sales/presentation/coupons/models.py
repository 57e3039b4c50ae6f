"""Request and response models for coupon endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from sales.domain.aggregates import Coupon, CouponQuote
from sales.domain.value_objects import CouponStatus, DiscountType, UsageType
from shared_kernel.api_models import APIModel


class ValidateCouponRequest(APIModel):
    """Coupon check for a cart total.

    Both fields are optional here so missing values get the storefront's
    own messages instead of a generic validation error.
    """

    code: str | None = None
    order_total: float | None = None


class CouponSummary(APIModel):
    id: str
    code: str
    discount_type: DiscountType
    discount_value: float


class ValidateCouponResponse(APIModel):
    valid: bool = True
    coupon: CouponSummary
    discount_amount: float
    final_total: float

    @classmethod
    def from_quote(cls, quote: CouponQuote) -> ValidateCouponResponse:
        return cls(
            coupon=CouponSummary(
                id=quote.coupon.id.value,
                code=quote.coupon.code,
                discount_type=quote.coupon.discount_type,
                discount_value=quote.coupon.discount_value,
            ),
            discount_amount=quote.discount_amount,
            final_total=quote.final_total,
        )


class CreateCouponRequest(APIModel):
    """Request to create a coupon.

    Attributes:
        code: Redemption code, stored trimmed and upper-cased
        discount_type: percentage or fixed
        discount_value: Percent (0-100] or fixed amount, greater than 0
        expiry_date: Last moment the coupon can be used (naive means UTC)
        usage_limit: Total redemptions allowed (default 100)
        minimum_order: Smallest qualifying subtotal (default 0)
        usage_type: multi_use or one_per_user
        max_uses_per_user: Per-email cap for multi_use coupons (default 1)
    """

    code: str = Field(..., min_length=1, max_length=64)
    discount_type: DiscountType
    discount_value: float
    expiry_date: datetime
    usage_limit: int | None = None
    minimum_order: float | None = None
    status: CouponStatus | None = None
    usage_type: UsageType | None = None
    max_uses_per_user: int | None = None


class UpdateCouponRequest(APIModel):
    """Partial update; omitted fields keep their value."""

    code: str | None = Field(default=None, min_length=1, max_length=64)
    discount_type: DiscountType | None = None
    discount_value: float | None = None
    expiry_date: datetime | None = None
    usage_limit: int | None = None
    minimum_order: float | None = None
    status: CouponStatus | None = None
    usage_type: UsageType | None = None
    max_uses_per_user: int | None = None


class CouponResponse(APIModel):
    id: str
    code: str
    discount_type: DiscountType
    discount_value: float
    expiry_date: datetime
    usage_limit: int
    times_used: int
    minimum_order: float
    status: CouponStatus
    usage_type: UsageType
    max_uses_per_user: int
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, coupon: Coupon) -> CouponResponse:
        return cls(
            id=coupon.id.value,
            code=coupon.code,
            discount_type=coupon.discount_type,
            discount_value=coupon.discount_value,
            expiry_date=coupon.expiry_date,
            usage_limit=coupon.usage_limit,
            times_used=coupon.times_used,
            minimum_order=coupon.minimum_order,
            status=coupon.status,
            usage_type=coupon.usage_type,
            max_uses_per_user=coupon.max_uses_per_user,
            created_at=coupon.created_at,
        )
