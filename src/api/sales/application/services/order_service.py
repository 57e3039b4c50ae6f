"""Order application service.

Places orders priced from the catalog and redeems coupons atomically with
the order insert.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from sales.application.observability import (
    DefaultOrderServiceProbe,
    OrderServiceProbe,
)
from sales.application.services.coupon_service import quote_coupon, utc_now
from sales.domain.aggregates import CouponRejectedError, Order, OrderItem
from sales.domain.value_objects import (
    CouponRejection,
    OrderId,
    OrderStatus,
    normalize_coupon_code,
)
from sales.ports.exceptions import InvalidOrderItemError, OrderNotFoundError
from sales.ports.repositories import (
    ICouponRepository,
    IOrderRepository,
    IProductCatalog,
)


@dataclass(frozen=True)
class OrderLine:
    """A requested line: which product and how many."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class Customer:
    """The caller placing or reading orders."""

    id: str
    email: str
    name: str
    is_admin: bool = False


class OrderService:
    """Application service for orders."""

    def __init__(
        self,
        session: AsyncSession,
        order_repository: IOrderRepository,
        coupon_repository: ICouponRepository,
        catalog: IProductCatalog,
        probe: OrderServiceProbe | None = None,
        currency: str = "LKR",
        clock: Callable[[], datetime] = utc_now,
    ):
        self._session = session
        self._orders = order_repository
        self._coupons = coupon_repository
        self._catalog = catalog
        self._probe = probe or DefaultOrderServiceProbe()
        self._currency = currency
        self._clock = clock

    async def list_orders(self, customer: Customer) -> list[Order]:
        """Admins see every order; customers see their own."""
        async with self._session.begin():
            return await self._orders.list_all(
                customer_id=None if customer.is_admin else customer.id
            )

    async def get_order(self, order_id: OrderId, customer: Customer) -> Order:
        """Load an order visible to ``customer``.

        Raises:
            OrderNotFoundError: If it does not exist or belongs to someone else
        """
        async with self._session.begin():
            order = await self._orders.get_by_id(order_id)
        if order is None or not (customer.is_admin or order.is_owned_by(customer.id)):
            raise OrderNotFoundError(f"Order {order_id} not found")
        return order

    async def place_order(
        self,
        customer: Customer,
        lines: list[OrderLine],
        coupon_code: str | None = None,
        **fields: Any,
    ) -> Order:
        """Price, discount and store a new order in one transaction.

        Prices always come from the catalog. When a coupon is given it is
        checked against the subtotal, then redeemed with a conditional
        increment; losing that race rejects the order.

        Args:
            customer: The caller placing the order
            lines: Requested products and quantities
            coupon_code: Optional coupon to apply
            **fields: shipping_address, notes, payment_method

        Returns:
            The stored order

        Raises:
            InvalidOrderItemError: If a product is unknown or not for sale
            CouponRejectedError: If the coupon cannot be applied
            ValueError: If a quantity or the item list is invalid
        """
        try:
            async with self._session.begin():
                items = await self._price_lines(lines)
                subtotal = sum(item.line_total for item in items)

                quote = None
                if coupon_code:
                    quote = await quote_coupon(
                        self._coupons,
                        code=normalize_coupon_code(coupon_code),
                        order_total=subtotal,
                        customer_email=customer.email,
                        now=self._clock(),
                        currency=self._currency,
                    )
                    if not await self._coupons.try_redeem(quote.coupon.id):
                        raise CouponRejectedError(
                            CouponRejection.USAGE_LIMIT_REACHED,
                            "This coupon has reached its usage limit",
                        )

                order = Order.place(
                    customer_id=customer.id,
                    customer_email=customer.email,
                    customer_name=customer.name,
                    items=items,
                    discount_amount=quote.discount_amount if quote else 0.0,
                    coupon_code=quote.coupon.code if quote else None,
                    currency=self._currency,
                    **fields,
                )
                await self._orders.save(order)

                if quote is not None:
                    await self._coupons.record_usage(
                        coupon_id=quote.coupon.id,
                        customer_id=customer.id,
                        customer_email=customer.email,
                        order_id=order.id,
                    )
                stored = await self._orders.get_by_id(order.id)
        except (InvalidOrderItemError, CouponRejectedError, ValueError) as e:
            self._probe.order_rejected(customer_id=customer.id, reason=str(e))
            raise

        result = stored or order
        self._probe.order_created(
            order_id=result.id.value,
            order_number=result.order_number,
            customer_id=customer.id,
            total_amount=result.total_amount,
            coupon_code=result.coupon_code,
        )
        return result

    async def update_status(self, order_id: OrderId, status: OrderStatus) -> Order:
        """Set an order's status.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        async with self._session.begin():
            if not await self._orders.update_status(order_id, status):
                raise OrderNotFoundError(f"Order {order_id} not found")
            order = await self._orders.get_by_id(order_id)

        self._probe.order_status_changed(order_id=order_id.value, status=status.value)
        if order is None:
            raise OrderNotFoundError(f"Order {order_id} not found")
        return order.with_status(status)

    async def _price_lines(self, lines: list[OrderLine]) -> list[OrderItem]:
        if not lines:
            raise ValueError("Order must contain at least one item")
        catalog = await self._catalog.get_sellable([line.product_id for line in lines])

        items = []
        for line in lines:
            entry = catalog.get(line.product_id)
            if entry is None:
                raise InvalidOrderItemError("Invalid product")
            items.append(
                OrderItem(
                    product_id=entry.product_id,
                    product_name=entry.name,
                    quantity=line.quantity,
                    unit_price=entry.price,
                )
            )
        return items
