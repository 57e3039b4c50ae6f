"""Unit tests for the Coupon aggregate."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from sales.domain.aggregates import Coupon, CouponRejectedError
from sales.domain.value_objects import (
    CouponRejection,
    CouponStatus,
    DiscountType,
    UsageType,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _coupon(**fields) -> Coupon:
    defaults = {
        "code": "save10",
        "discount_type": DiscountType.PERCENTAGE,
        "discount_value": 10,
        "expiry_date": NOW + timedelta(days=30),
    }
    defaults.update(fields)
    return Coupon.create(**defaults)


def _rejection(coupon: Coupon, order_total: float = 2000, uses: int = 0):
    with pytest.raises(CouponRejectedError) as exc_info:
        coupon.evaluate(order_total=order_total, now=NOW, uses_by_customer=uses)
    return exc_info.value


class TestCreate:
    def test_code_is_normalized(self):
        assert _coupon(code="  save10 ").code == "SAVE10"

    def test_defaults(self):
        coupon = _coupon()

        assert coupon.usage_limit == 100
        assert coupon.times_used == 0
        assert coupon.minimum_order == 0
        assert coupon.status is CouponStatus.ACTIVE
        assert coupon.usage_type is UsageType.MULTI_USE
        assert coupon.max_uses_per_user == 1

    @pytest.mark.parametrize(
        ("fields", "message"),
        [
            ({"discount_value": 0}, "greater than 0"),
            ({"discount_value": 101}, "between 0 and 100"),
            ({"usage_limit": 0}, "Usage limit"),
            ({"minimum_order": -1}, "Minimum order"),
            ({"max_uses_per_user": 0}, "Max uses"),
            ({"code": "   "}, "code is required"),
        ],
    )
    def test_invalid_fields(self, fields, message):
        with pytest.raises(ValueError, match=message):
            _coupon(**fields)

    def test_fixed_discount_may_exceed_100(self):
        assert _coupon(discount_type=DiscountType.FIXED, discount_value=500)


class TestEvaluate:
    """Redemption checks and discount arithmetic."""

    def test_percentage_discount(self):
        quote = _coupon().evaluate(order_total=2000, now=NOW, uses_by_customer=0)

        assert quote.discount_amount == 200
        assert quote.final_total == 1800

    def test_fixed_discount(self):
        coupon = _coupon(discount_type=DiscountType.FIXED, discount_value=250)

        quote = coupon.evaluate(order_total=2000, now=NOW, uses_by_customer=0)

        assert quote.discount_amount == 250
        assert quote.final_total == 1750

    def test_fixed_discount_clamped_to_total(self):
        coupon = _coupon(discount_type=DiscountType.FIXED, discount_value=5000)

        quote = coupon.evaluate(order_total=1200, now=NOW, uses_by_customer=0)

        assert quote.discount_amount == 1200
        assert quote.final_total == 0

    def test_full_percentage_discount(self):
        quote = _coupon(discount_value=100).evaluate(
            order_total=999.99, now=NOW, uses_by_customer=0
        )

        assert quote.final_total == 0

    def test_discount_rounded_to_cents(self):
        quote = _coupon(discount_value=15).evaluate(
            order_total=333.33, now=NOW, uses_by_customer=0
        )

        assert quote.discount_amount == 50.0

    def test_inactive(self):
        error = _rejection(_coupon(status=CouponStatus.INACTIVE))

        assert error.reason is CouponRejection.INACTIVE
        assert error.message == "This coupon is not active"

    def test_expired(self):
        error = _rejection(_coupon(expiry_date=NOW - timedelta(seconds=1)))

        assert error.reason is CouponRejection.EXPIRED
        assert error.message == "This coupon has expired"

    def test_expiring_now_is_still_valid(self):
        coupon = _coupon(expiry_date=NOW)

        assert coupon.evaluate(order_total=100, now=NOW, uses_by_customer=0)

    def test_usage_limit_reached(self):
        error = _rejection(_coupon(usage_limit=5, times_used=5))

        assert error.reason is CouponRejection.USAGE_LIMIT_REACHED
        assert error.message == "This coupon has reached its usage limit"

    def test_one_per_user_already_used(self):
        error = _rejection(_coupon(usage_type=UsageType.ONE_PER_USER), uses=1)

        assert error.reason is CouponRejection.ALREADY_USED
        assert error.message == "You have already used this coupon"

    def test_multi_use_per_user_limit(self):
        coupon = _coupon(max_uses_per_user=3)

        assert coupon.evaluate(order_total=2000, now=NOW, uses_by_customer=2)
        error = _rejection(coupon, uses=3)
        assert error.reason is CouponRejection.USER_LIMIT_REACHED
        assert error.message == (
            "You have reached the maximum usage limit for this coupon"
        )

    def test_below_minimum_order(self):
        error = _rejection(_coupon(minimum_order=1000), order_total=999)

        assert error.reason is CouponRejection.BELOW_MINIMUM
        assert error.message == "Minimum order of LKR 1,000 required for this coupon"

    def test_minimum_order_message_uses_currency(self):
        coupon = _coupon(minimum_order=1500.5)

        with pytest.raises(CouponRejectedError) as exc_info:
            coupon.evaluate(order_total=10, now=NOW, uses_by_customer=0, currency="USD")

        assert exc_info.value.message == (
            "Minimum order of USD 1,500.5 required for this coupon"
        )

    def test_first_failing_check_wins(self):
        """An inactive, expired, exhausted coupon reports inactive."""
        coupon = _coupon(
            status=CouponStatus.INACTIVE,
            expiry_date=NOW - timedelta(days=1),
            usage_limit=1,
            times_used=1,
        )

        assert _rejection(coupon).reason is CouponRejection.INACTIVE


class TestUpdated:
    def test_ignores_none_and_normalizes_code(self):
        coupon = _coupon(minimum_order=500)

        updated = coupon.updated(code="vesak25", minimum_order=None)

        assert updated.code == "VESAK25"
        assert updated.minimum_order == 500
        assert updated.id == coupon.id

    def test_revalidates(self):
        with pytest.raises(ValueError):
            _coupon().updated(discount_value=150)
