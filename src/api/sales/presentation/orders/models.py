"""Request and response models for order endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from sales.domain.aggregates import Order
from sales.domain.value_objects import OrderStatus
from shared_kernel.api_models import APIModel


class OrderLineRequest(APIModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)


class CreateOrderRequest(APIModel):
    """Request to place an order.

    Prices are never accepted from the client; each line is priced from
    the product record.
    """

    items: list[OrderLineRequest] = Field(..., min_length=1)
    shipping_address: dict[str, Any] | None = None
    notes: str | None = None
    payment_method: str | None = Field(default=None, max_length=32)
    coupon_code: str | None = None


class UpdateOrderStatusRequest(APIModel):
    status: OrderStatus


class OrderItemResponse(APIModel):
    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    line_total: float


class OrderResponse(APIModel):
    id: str
    order_number: str
    customer_id: str
    customer_email: str
    customer_name: str
    status: OrderStatus
    items: list[OrderItemResponse]
    subtotal: float
    discount_amount: float
    total_amount: float
    coupon_code: str | None = None
    currency: str
    payment_method: str
    shipping_address: dict[str, Any] | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, order: Order) -> OrderResponse:
        return cls(
            id=order.id.value,
            order_number=order.order_number,
            customer_id=order.customer_id,
            customer_email=order.customer_email,
            customer_name=order.customer_name,
            status=order.status,
            items=[
                OrderItemResponse(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
                for item in order.items
            ],
            subtotal=order.subtotal,
            discount_amount=order.discount_amount,
            total_amount=order.total_amount,
            coupon_code=order.coupon_code,
            currency=order.currency,
            payment_method=order.payment_method,
            shipping_address=order.shipping_address,
            notes=order.notes,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
