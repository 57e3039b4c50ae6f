"""Coupon aggregate and discount arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from sales.domain.value_objects import (
    CouponId,
    CouponRejection,
    CouponStatus,
    DiscountType,
    UsageType,
    normalize_coupon_code,
)
from shared_kernel.money import format_amount, round_money

DEFAULT_USAGE_LIMIT = 100


class CouponRejectedError(ValueError):
    """Raised when a coupon cannot be applied to an order.

    Attributes:
        reason: Which check failed
        message: Customer-facing explanation
    """

    def __init__(self, reason: CouponRejection, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


@dataclass(frozen=True)
class CouponQuote:
    """Result of applying a coupon to an order total."""

    coupon: Coupon
    order_total: float
    discount_amount: float

    @property
    def final_total(self) -> float:
        return round_money(self.order_total - self.discount_amount)


@dataclass(frozen=True)
class Coupon:
    """A discount code.

    Business rules:
    - Codes are unique, trimmed and upper-cased
    - The discount value is positive; percentages are at most 100
    - A computed discount never exceeds the order total
    - Checks run in a fixed order: status, expiry, global usage, per-user
      usage, minimum order; the first failure wins
    """

    id: CouponId
    code: str
    discount_type: DiscountType
    discount_value: float
    expiry_date: datetime
    usage_limit: int = DEFAULT_USAGE_LIMIT
    times_used: int = 0
    minimum_order: float = 0.0
    status: CouponStatus = CouponStatus.ACTIVE
    usage_type: UsageType = UsageType.MULTI_USE
    max_uses_per_user: int = 1
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Coupon code is required")
        if self.discount_value <= 0:
            raise ValueError("Discount value must be greater than 0")
        if self.discount_type is DiscountType.PERCENTAGE and self.discount_value > 100:
            raise ValueError("Percentage discount must be between 0 and 100")
        if self.usage_limit < 1:
            raise ValueError("Usage limit must be at least 1")
        if self.minimum_order < 0:
            raise ValueError("Minimum order cannot be negative")
        if self.max_uses_per_user < 1:
            raise ValueError("Max uses per user must be at least 1")

    @classmethod
    def create(
        cls,
        code: str,
        discount_type: DiscountType,
        discount_value: float,
        expiry_date: datetime,
        **fields,
    ) -> Coupon:
        """Create a coupon with the storefront defaults.

        Raises:
            ValueError: If a field breaks a business rule
        """
        return cls(
            id=CouponId.generate(),
            code=normalize_coupon_code(code),
            discount_type=discount_type,
            discount_value=discount_value,
            expiry_date=expiry_date,
            **fields,
        )

    def updated(self, **changes) -> Coupon:
        """Return a re-validated copy; ``None`` values are ignored."""
        changes = {key: value for key, value in changes.items() if value is not None}
        if "code" in changes:
            changes["code"] = normalize_coupon_code(changes["code"])
        return replace(self, **changes)

    def is_active_at(self, now: datetime) -> bool:
        return self.status is CouponStatus.ACTIVE and self.expiry_date >= now

    def discount_for(self, order_total: float) -> float:
        """Discount for ``order_total``, clamped to the total."""
        if self.discount_type is DiscountType.PERCENTAGE:
            discount = order_total * self.discount_value / 100
        else:
            discount = self.discount_value
        return round_money(min(discount, order_total))

    def evaluate(
        self,
        order_total: float,
        now: datetime,
        uses_by_customer: int,
        currency: str = "LKR",
    ) -> CouponQuote:
        """Check every redemption rule, then price the discount.

        Args:
            order_total: Order subtotal the coupon applies to
            now: Current time, compared against the expiry date
            uses_by_customer: Earlier redemptions by the same email
            currency: Currency shown in the minimum-order message

        Returns:
            The discount and final total

        Raises:
            CouponRejectedError: On the first failed check
        """
        if self.status is not CouponStatus.ACTIVE:
            raise CouponRejectedError(
                CouponRejection.INACTIVE, "This coupon is not active"
            )
        if self.expiry_date < now:
            raise CouponRejectedError(
                CouponRejection.EXPIRED, "This coupon has expired"
            )
        if self.times_used >= self.usage_limit:
            raise CouponRejectedError(
                CouponRejection.USAGE_LIMIT_REACHED,
                "This coupon has reached its usage limit",
            )
        if self.usage_type is UsageType.ONE_PER_USER:
            if uses_by_customer > 0:
                raise CouponRejectedError(
                    CouponRejection.ALREADY_USED, "You have already used this coupon"
                )
        elif uses_by_customer >= self.max_uses_per_user:
            raise CouponRejectedError(
                CouponRejection.USER_LIMIT_REACHED,
                "You have reached the maximum usage limit for this coupon",
            )
        if order_total < self.minimum_order:
            raise CouponRejectedError(
                CouponRejection.BELOW_MINIMUM,
                f"Minimum order of {format_amount(self.minimum_order, currency)} "
                "required for this coupon",
            )

        return CouponQuote(
            coupon=self,
            order_total=order_total,
            discount_amount=self.discount_for(order_total),
        )
