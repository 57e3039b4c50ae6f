"""Order dependency providers for sales context."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from infrastructure.settings import Settings, get_settings
from sales.application.observability import (
    DefaultOrderServiceProbe,
    OrderServiceProbe,
)
from sales.application.services import OrderService
from sales.dependencies.coupon import get_coupon_repository
from sales.infrastructure.coupon_repository import CouponRepository
from sales.infrastructure.order_repository import OrderRepository
from sales.infrastructure.product_catalog import ProductCatalog


def get_order_service_probe() -> OrderServiceProbe:
    return DefaultOrderServiceProbe()


def get_order_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> OrderRepository:
    return OrderRepository(session=session)


def get_product_catalog(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> ProductCatalog:
    return ProductCatalog(session=session)


def get_order_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    order_repo: Annotated[OrderRepository, Depends(get_order_repository)],
    coupon_repo: Annotated[CouponRepository, Depends(get_coupon_repository)],
    catalog: Annotated[ProductCatalog, Depends(get_product_catalog)],
    probe: Annotated[OrderServiceProbe, Depends(get_order_service_probe)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> OrderService:
    """Get OrderService instance.

    The order, coupon and catalog repositories share the request session,
    so coupon redemption commits together with the order.

    Returns:
        OrderService instance
    """
    return OrderService(
        session=session,
        order_repository=order_repo,
        coupon_repository=coupon_repo,
        catalog=catalog,
        probe=probe,
        currency=settings.currency,
    )
