"""PostgreSQL implementation of ICouponRepository."""

from __future__ import annotations

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sales.domain.aggregates import Coupon
from sales.domain.value_objects import (
    CouponId,
    CouponStatus,
    DiscountType,
    OrderId,
    UsageType,
    normalize_coupon_code,
)
from sales.infrastructure.models import CouponModel, CouponUsageModel
from sales.infrastructure.observability import (
    CouponRepositoryProbe,
    DefaultCouponRepositoryProbe,
)
from sales.ports.repositories import ICouponRepository
from shared_kernel.identifiers import EntityId


class CouponRepository(ICouponRepository):
    """PostgreSQL-backed repository for Coupon aggregates.

    Runs inside the caller's transaction; only flushes, never commits.
    """

    def __init__(
        self, session: AsyncSession, probe: CouponRepositoryProbe | None = None
    ) -> None:
        self._session = session
        self._probe = probe or DefaultCouponRepositoryProbe()

    async def save(self, coupon: Coupon) -> None:
        """Insert or update a coupon.

        ``times_used`` is only written on insert; afterwards it changes
        through ``try_redeem`` alone.
        """
        model = await self._session.get(CouponModel, coupon.id.value)
        if model is None:
            model = CouponModel(id=coupon.id.value, times_used=coupon.times_used)
            self._session.add(model)

        model.code = coupon.code
        model.discount_type = coupon.discount_type.value
        model.discount_value = coupon.discount_value
        model.expiry_date = coupon.expiry_date
        model.usage_limit = coupon.usage_limit
        model.minimum_order = coupon.minimum_order
        model.status = coupon.status.value
        model.usage_type = coupon.usage_type.value
        model.max_uses_per_user = coupon.max_uses_per_user
        await self._session.flush()

    async def get_by_id(self, coupon_id: CouponId) -> Coupon | None:
        model = await self._session.get(CouponModel, coupon_id.value)
        return self._to_domain(model) if model else None

    async def get_by_code(self, code: str) -> Coupon | None:
        stmt = select(CouponModel).where(
            CouponModel.code == normalize_coupon_code(code)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_all(self) -> list[Coupon]:
        stmt = select(CouponModel).order_by(CouponModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, coupon_id: CouponId) -> bool:
        stmt = delete(CouponModel).where(CouponModel.id == coupon_id.value)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def count_usages(self, coupon_id: CouponId, customer_email: str) -> int:
        stmt = select(func.count(CouponUsageModel.id)).where(
            CouponUsageModel.coupon_id == coupon_id.value,
            func.lower(CouponUsageModel.customer_email) == customer_email.lower(),
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def try_redeem(self, coupon_id: CouponId) -> bool:
        """Increment ``times_used`` with a single conditional UPDATE.

        The row lock taken by the UPDATE serializes concurrent redemptions,
        so the limit holds without a read-then-write race.
        """
        stmt = (
            update(CouponModel)
            .where(
                CouponModel.id == coupon_id.value,
                CouponModel.times_used < CouponModel.usage_limit,
            )
            .values(times_used=CouponModel.times_used + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        redeemed = result.rowcount == 1
        if not redeemed:
            self._probe.redemption_refused(coupon_id=coupon_id.value)
        return redeemed

    async def record_usage(
        self,
        coupon_id: CouponId,
        customer_id: str,
        customer_email: str,
        order_id: OrderId,
    ) -> None:
        self._session.add(
            CouponUsageModel(
                id=EntityId.generate().value,
                coupon_id=coupon_id.value,
                customer_id=customer_id,
                customer_email=customer_email.lower(),
                order_id=order_id.value,
            )
        )
        await self._session.flush()
        self._probe.usage_recorded(coupon_id=coupon_id.value, order_id=order_id.value)

    @staticmethod
    def _to_domain(model: CouponModel) -> Coupon:
        return Coupon(
            id=CouponId(value=model.id),
            code=model.code,
            discount_type=DiscountType(model.discount_type),
            discount_value=float(model.discount_value),
            expiry_date=model.expiry_date,
            usage_limit=model.usage_limit,
            times_used=model.times_used,
            minimum_order=float(model.minimum_order),
            status=CouponStatus(model.status),
            usage_type=UsageType(model.usage_type),
            max_uses_per_user=model.max_uses_per_user,
            created_at=model.created_at,
        )
