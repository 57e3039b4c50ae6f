"""Coupon application service.

Validates coupons for customers and manages them for admins.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from sales.application.observability import (
    CouponServiceProbe,
    DefaultCouponServiceProbe,
)
from sales.domain.aggregates import Coupon, CouponQuote, CouponRejectedError
from sales.domain.value_objects import (
    CouponId,
    CouponRejection,
    DiscountType,
    normalize_coupon_code,
)
from sales.ports.exceptions import CouponNotFoundError, DuplicateCouponCodeError
from sales.ports.repositories import ICouponRepository


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


async def quote_coupon(
    coupons: ICouponRepository,
    code: str,
    order_total: float,
    customer_email: str,
    now: datetime,
    currency: str,
) -> CouponQuote:
    """Look up ``code`` and run every redemption check against it.

    Must run inside the caller's transaction.

    Raises:
        CouponRejectedError: With reason NOT_FOUND when the code is unknown,
            or the reason of the first failed check
    """
    coupon = await coupons.get_by_code(code)
    if coupon is None:
        raise CouponRejectedError(CouponRejection.NOT_FOUND, "Invalid coupon code")
    prior_uses = await coupons.count_usages(coupon.id, customer_email)
    return coupon.evaluate(
        order_total=order_total,
        now=now,
        uses_by_customer=prior_uses,
        currency=currency,
    )


class CouponService:
    """Application service for coupons."""

    def __init__(
        self,
        session: AsyncSession,
        coupon_repository: ICouponRepository,
        probe: CouponServiceProbe | None = None,
        currency: str = "LKR",
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize CouponService with dependencies.

        Args:
            session: Database session for transaction management
            coupon_repository: Repository for coupon persistence
            probe: Optional domain probe for observability
            currency: Currency shown in customer-facing messages
            clock: Source of the current time, compared against expiry dates
        """
        self._session = session
        self._coupons = coupon_repository
        self._probe = probe or DefaultCouponServiceProbe()
        self._currency = currency
        self._clock = clock

    async def validate_coupon(
        self, code: str, order_total: float, customer_email: str
    ) -> CouponQuote:
        """Price a coupon for an order total without redeeming it.

        Read-only, so repeating the call with unchanged state returns the
        same quote.

        Raises:
            CouponRejectedError: If the coupon is unknown or not applicable
        """
        normalized = normalize_coupon_code(code)
        try:
            async with self._session.begin():
                quote = await quote_coupon(
                    self._coupons,
                    code=normalized,
                    order_total=order_total,
                    customer_email=customer_email,
                    now=self._clock(),
                    currency=self._currency,
                )
        except CouponRejectedError as e:
            self._probe.coupon_validation_rejected(code=normalized, reason=e.reason)
            raise

        self._probe.coupon_validated(
            code=normalized,
            order_total=order_total,
            discount_amount=quote.discount_amount,
        )
        return quote

    async def list_coupons(self) -> list[Coupon]:
        async with self._session.begin():
            return await self._coupons.list_all()

    async def get_coupon(self, coupon_id: CouponId) -> Coupon:
        async with self._session.begin():
            coupon = await self._coupons.get_by_id(coupon_id)
        if coupon is None:
            raise CouponNotFoundError(f"Coupon {coupon_id} not found")
        return coupon

    async def create_coupon(
        self,
        code: str,
        discount_type: DiscountType,
        discount_value: float,
        expiry_date: datetime,
        **fields: Any,
    ) -> Coupon:
        """Create a coupon; omitted optional fields take the defaults.

        Raises:
            ValueError: If a field breaks a business rule
            DuplicateCouponCodeError: If the code is taken
        """
        coupon = Coupon.create(
            code=code,
            discount_type=discount_type,
            discount_value=discount_value,
            expiry_date=as_utc(expiry_date),
            **{key: value for key, value in fields.items() if value is not None},
        )
        async with self._session.begin():
            if await self._coupons.get_by_code(coupon.code) is not None:
                raise DuplicateCouponCodeError("Coupon code already exists")
            await self._coupons.save(coupon)

        self._probe.coupon_created(coupon_id=coupon.id.value, code=coupon.code)
        return coupon

    async def update_coupon(self, coupon_id: CouponId, **changes: Any) -> Coupon:
        """Apply a partial update; ``None`` values are ignored.

        Raises:
            CouponNotFoundError: If no coupon has this id
            ValueError: If a field breaks a business rule
            DuplicateCouponCodeError: If the new code is taken
        """
        if changes.get("expiry_date") is not None:
            changes["expiry_date"] = as_utc(changes["expiry_date"])

        async with self._session.begin():
            coupon = await self._coupons.get_by_id(coupon_id)
            if coupon is None:
                raise CouponNotFoundError(f"Coupon {coupon_id} not found")

            updated = coupon.updated(**changes)
            if updated.code != coupon.code:
                if await self._coupons.get_by_code(updated.code) is not None:
                    raise DuplicateCouponCodeError("Coupon code already exists")
            await self._coupons.save(updated)

        self._probe.coupon_updated(coupon_id=coupon_id.value)
        return updated

    async def delete_coupon(self, coupon_id: CouponId) -> None:
        async with self._session.begin():
            if not await self._coupons.delete(coupon_id):
                raise CouponNotFoundError(f"Coupon {coupon_id} not found")
        self._probe.coupon_deleted(coupon_id=coupon_id.value)
