"""Order aggregate."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from sales.domain.value_objects import OrderId, OrderStatus
from shared_kernel.money import round_money

DEFAULT_PAYMENT_METHOD = "cod"


def generate_order_number(now_millis: int | None = None) -> str:
    """``ORD-<epoch milliseconds>``."""
    if now_millis is None:
        now_millis = time.time_ns() // 1_000_000
    return f"ORD-{now_millis}"


@dataclass(frozen=True)
class OrderItem:
    """One order line, priced from the catalog at placement time."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: float

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def line_total(self) -> float:
        return round_money(self.unit_price * self.quantity)


@dataclass(frozen=True)
class Order:
    """A placed order.

    Business rules:
    - Totals are derived from the items and discount, never supplied
    - The discount never exceeds the subtotal
    """

    id: OrderId
    order_number: str
    customer_id: str
    customer_email: str
    customer_name: str
    items: tuple[OrderItem, ...]
    discount_amount: float = 0.0
    coupon_code: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    currency: str = "LKR"
    payment_method: str = DEFAULT_PAYMENT_METHOD
    shipping_address: dict[str, Any] | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("Order must contain at least one item")
        if self.discount_amount < 0 or self.discount_amount > self.subtotal:
            raise ValueError("Discount must be between 0 and the subtotal")

    @classmethod
    def place(
        cls,
        customer_id: str,
        customer_email: str,
        customer_name: str,
        items: list[OrderItem],
        discount_amount: float = 0.0,
        coupon_code: str | None = None,
        **fields,
    ) -> Order:
        """Create a pending order.

        Raises:
            ValueError: If there are no items or the discount is out of range
        """
        return cls(
            id=OrderId.generate(),
            order_number=generate_order_number(),
            customer_id=customer_id,
            customer_email=customer_email,
            customer_name=customer_name,
            items=tuple(items),
            discount_amount=discount_amount,
            coupon_code=coupon_code,
            **{key: value for key, value in fields.items() if value is not None},
        )

    @property
    def subtotal(self) -> float:
        return round_money(sum(item.line_total for item in self.items))

    @property
    def total_amount(self) -> float:
        return round_money(self.subtotal - self.discount_amount)

    def is_owned_by(self, customer_id: str) -> bool:
        return self.customer_id == customer_id

    def with_status(self, status: OrderStatus) -> Order:
        return replace(self, status=status)
