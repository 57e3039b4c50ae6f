"""Coupon dependency providers for sales context."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from infrastructure.settings import Settings, get_settings
from sales.application.observability import (
    CouponServiceProbe,
    DefaultCouponServiceProbe,
)
from sales.application.services import CouponService
from sales.infrastructure.coupon_repository import CouponRepository


def get_coupon_service_probe() -> CouponServiceProbe:
    """Get CouponServiceProbe instance.

    Returns:
        DefaultCouponServiceProbe instance for observability
    """
    return DefaultCouponServiceProbe()


def get_coupon_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> CouponRepository:
    return CouponRepository(session=session)


def get_coupon_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    coupon_repo: Annotated[CouponRepository, Depends(get_coupon_repository)],
    probe: Annotated[CouponServiceProbe, Depends(get_coupon_service_probe)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CouponService:
    """Get CouponService instance.

    Returns:
        CouponService priced in the store currency
    """
    return CouponService(
        session=session,
        coupon_repository=coupon_repo,
        probe=probe,
        currency=settings.currency,
    )
