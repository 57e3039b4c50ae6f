"""Unit tests for CouponService."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, create_autospec

import pytest

from sales.application.observability import CouponServiceProbe
from sales.application.services import CouponService
from sales.domain.aggregates import Coupon
from sales.domain.value_objects import (
    CouponId,
    CouponRejection,
    DiscountType,
    UsageType,
)
from sales.ports.exceptions import (
    CouponNotFoundError,
    CouponRejectedError,
    DuplicateCouponCodeError,
)
from sales.ports.repositories import ICouponRepository

NOW = datetime(2026, 5, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def mock_coupons():
    return create_autospec(ICouponRepository, instance=True)


@pytest.fixture
def mock_probe():
    return create_autospec(CouponServiceProbe, instance=True)


@pytest.fixture
def service(mock_session, mock_coupons, mock_probe):
    return CouponService(
        session=mock_session,
        coupon_repository=mock_coupons,
        probe=mock_probe,
        currency="LKR",
        clock=lambda: NOW,
    )


def _coupon(**fields) -> Coupon:
    defaults = {
        "code": "SAVE10",
        "discount_type": DiscountType.PERCENTAGE,
        "discount_value": 10,
        "expiry_date": NOW + timedelta(days=7),
    }
    defaults.update(fields)
    return Coupon.create(**defaults)


class TestValidateCoupon:
    @pytest.mark.asyncio
    async def test_valid_coupon_is_quoted(self, service, mock_coupons, mock_probe):
        coupon = _coupon()
        mock_coupons.get_by_code = AsyncMock(return_value=coupon)
        mock_coupons.count_usages = AsyncMock(return_value=0)

        quote = await service.validate_coupon(
            code=" save10 ", order_total=2000, customer_email="a@example.com"
        )

        assert quote.discount_amount == 200
        assert quote.final_total == 1800
        mock_coupons.get_by_code.assert_awaited_once_with("SAVE10")
        mock_coupons.count_usages.assert_awaited_once_with(coupon.id, "a@example.com")
        mock_coupons.try_redeem.assert_not_called()
        mock_probe.coupon_validated.assert_called_once_with(
            code="SAVE10", order_total=2000, discount_amount=200
        )

    @pytest.mark.asyncio
    async def test_unknown_code(self, service, mock_coupons, mock_probe):
        mock_coupons.get_by_code = AsyncMock(return_value=None)

        with pytest.raises(CouponRejectedError) as exc_info:
            await service.validate_coupon(
                code="NOPE", order_total=100, customer_email="a@example.com"
            )

        assert exc_info.value.reason is CouponRejection.NOT_FOUND
        assert exc_info.value.message == "Invalid coupon code"
        mock_probe.coupon_validation_rejected.assert_called_once_with(
            code="NOPE", reason=CouponRejection.NOT_FOUND
        )

    @pytest.mark.asyncio
    async def test_expiry_uses_injected_clock(self, service, mock_coupons):
        mock_coupons.get_by_code = AsyncMock(
            return_value=_coupon(expiry_date=NOW - timedelta(minutes=1))
        )
        mock_coupons.count_usages = AsyncMock(return_value=0)

        with pytest.raises(CouponRejectedError) as exc_info:
            await service.validate_coupon(
                code="SAVE10", order_total=100, customer_email="a@example.com"
            )

        assert exc_info.value.reason is CouponRejection.EXPIRED

    @pytest.mark.asyncio
    async def test_one_per_user_counts_prior_uses(self, service, mock_coupons):
        mock_coupons.get_by_code = AsyncMock(
            return_value=_coupon(usage_type=UsageType.ONE_PER_USER)
        )
        mock_coupons.count_usages = AsyncMock(return_value=1)

        with pytest.raises(CouponRejectedError) as exc_info:
            await service.validate_coupon(
                code="SAVE10", order_total=100, customer_email="a@example.com"
            )

        assert exc_info.value.message == "You have already used this coupon"

    @pytest.mark.asyncio
    async def test_repeated_validation_is_idempotent(self, service, mock_coupons):
        mock_coupons.get_by_code = AsyncMock(return_value=_coupon())
        mock_coupons.count_usages = AsyncMock(return_value=0)

        first = await service.validate_coupon("SAVE10", 1500, "a@example.com")
        second = await service.validate_coupon("SAVE10", 1500, "a@example.com")

        assert first == second
        mock_coupons.save.assert_not_called()


class TestCreateCoupon:
    @pytest.mark.asyncio
    async def test_creates_with_defaults(self, service, mock_coupons, mock_probe):
        mock_coupons.get_by_code = AsyncMock(return_value=None)

        coupon = await service.create_coupon(
            code="vesak",
            discount_type=DiscountType.FIXED,
            discount_value=500,
            expiry_date=datetime(2026, 6, 1),
            usage_limit=None,
            minimum_order=2500,
        )

        assert coupon.code == "VESAK"
        assert coupon.usage_limit == 100
        assert coupon.minimum_order == 2500
        assert coupon.expiry_date.tzinfo is timezone.utc
        mock_coupons.save.assert_awaited_once_with(coupon)
        mock_probe.coupon_created.assert_called_once_with(
            coupon_id=coupon.id.value, code="VESAK"
        )

    @pytest.mark.asyncio
    async def test_duplicate_code(self, service, mock_coupons):
        mock_coupons.get_by_code = AsyncMock(return_value=_coupon())

        with pytest.raises(DuplicateCouponCodeError, match="already exists"):
            await service.create_coupon(
                code="save10",
                discount_type=DiscountType.PERCENTAGE,
                discount_value=5,
                expiry_date=NOW,
            )

        mock_coupons.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_percentage(self, service, mock_coupons):
        with pytest.raises(ValueError):
            await service.create_coupon(
                code="BIG",
                discount_type=DiscountType.PERCENTAGE,
                discount_value=120,
                expiry_date=NOW,
            )


class TestUpdateCoupon:
    @pytest.mark.asyncio
    async def test_missing(self, service, mock_coupons):
        mock_coupons.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(CouponNotFoundError):
            await service.update_coupon(CouponId.generate(), discount_value=5)

    @pytest.mark.asyncio
    async def test_code_change_checks_uniqueness(self, service, mock_coupons):
        coupon = _coupon()
        mock_coupons.get_by_id = AsyncMock(return_value=coupon)
        mock_coupons.get_by_code = AsyncMock(return_value=_coupon(code="TAKEN"))

        with pytest.raises(DuplicateCouponCodeError):
            await service.update_coupon(coupon.id, code="taken")

    @pytest.mark.asyncio
    async def test_same_code_skips_uniqueness(self, service, mock_coupons):
        coupon = _coupon()
        mock_coupons.get_by_id = AsyncMock(return_value=coupon)

        updated = await service.update_coupon(coupon.id, discount_value=20, code=None)

        assert updated.discount_value == 20
        mock_coupons.get_by_code.assert_not_called()
        mock_coupons.save.assert_awaited_once_with(updated)


class TestDeleteCoupon:
    @pytest.mark.asyncio
    async def test_missing(self, service, mock_coupons):
        mock_coupons.delete = AsyncMock(return_value=False)

        with pytest.raises(CouponNotFoundError):
            await service.delete_coupon(CouponId.generate())

    @pytest.mark.asyncio
    async def test_deletes(self, service, mock_coupons, mock_probe):
        mock_coupons.delete = AsyncMock(return_value=True)
        coupon_id = CouponId.generate()

        await service.delete_coupon(coupon_id)

        mock_probe.coupon_deleted.assert_called_once_with(coupon_id=coupon_id.value)
