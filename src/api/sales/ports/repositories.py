"""Repository protocols (ports) for the sales bounded context.

Implementations never open transactions; the calling service owns them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from sales.domain.aggregates import Coupon, Order
from sales.domain.value_objects import CouponId, OrderId, OrderStatus


@dataclass(frozen=True)
class CatalogEntry:
    """Name and current price of a sellable product."""

    product_id: str
    name: str
    price: float


@runtime_checkable
class IProductCatalog(Protocol):
    """Read-only view of the catalog used to price orders."""

    async def get_sellable(self, product_ids: list[str]) -> dict[str, CatalogEntry]:
        """Return active products among ``product_ids``, keyed by id."""
        ...


@runtime_checkable
class ICouponRepository(Protocol):
    async def save(self, coupon: Coupon) -> None: ...

    async def get_by_id(self, coupon_id: CouponId) -> Coupon | None: ...

    async def get_by_code(self, code: str) -> Coupon | None:
        """Retrieve a coupon by its normalized code."""
        ...

    async def list_all(self) -> list[Coupon]:
        """List coupons newest first."""
        ...

    async def delete(self, coupon_id: CouponId) -> bool: ...

    async def count_usages(self, coupon_id: CouponId, customer_email: str) -> int:
        """Count earlier redemptions of a coupon by one email address."""
        ...

    async def try_redeem(self, coupon_id: CouponId) -> bool:
        """Atomically increment ``times_used`` if still below the limit.

        Returns:
            False when the limit was already reached
        """
        ...

    async def record_usage(
        self,
        coupon_id: CouponId,
        customer_id: str,
        customer_email: str,
        order_id: OrderId,
    ) -> None: ...


@runtime_checkable
class IOrderRepository(Protocol):
    async def save(self, order: Order) -> None: ...

    async def get_by_id(self, order_id: OrderId) -> Order | None: ...

    async def list_all(self, customer_id: str | None = None) -> list[Order]:
        """List orders newest first, optionally for one customer."""
        ...

    async def update_status(self, order_id: OrderId, status: OrderStatus) -> bool: ...
