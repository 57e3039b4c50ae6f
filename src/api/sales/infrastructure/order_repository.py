"""PostgreSQL implementation of IOrderRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sales.domain.aggregates import Order, OrderItem
from sales.domain.value_objects import OrderId, OrderStatus
from sales.infrastructure.models import OrderItemModel, OrderModel
from sales.ports.repositories import IOrderRepository


class OrderRepository(IOrderRepository):
    """PostgreSQL-backed repository for Order aggregates.

    Items are written once, with the order; afterwards only the status
    changes.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, order: Order) -> None:
        model = await self._session.get(OrderModel, order.id.value)
        if model is not None:
            model.status = order.status.value
            await self._session.flush()
            return

        model = OrderModel(
            id=order.id.value,
            order_number=order.order_number,
            customer_id=order.customer_id,
            customer_email=order.customer_email,
            customer_name=order.customer_name,
            status=order.status.value,
            subtotal=order.subtotal,
            discount_amount=order.discount_amount,
            total_amount=order.total_amount,
            coupon_code=order.coupon_code,
            currency=order.currency,
            payment_method=order.payment_method,
            shipping_address=order.shipping_address,
            notes=order.notes,
            items=[
                OrderItemModel(
                    position=position,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
                for position, item in enumerate(order.items)
            ],
        )
        self._session.add(model)
        await self._session.flush()

    async def get_by_id(self, order_id: OrderId) -> Order | None:
        model = await self._session.get(OrderModel, order_id.value)
        return self._to_domain(model) if model else None

    async def list_all(self, customer_id: str | None = None) -> list[Order]:
        stmt = select(OrderModel).order_by(OrderModel.created_at.desc())
        if customer_id is not None:
            stmt = stmt.where(OrderModel.customer_id == customer_id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def update_status(self, order_id: OrderId, status: OrderStatus) -> bool:
        stmt = (
            update(OrderModel)
            .where(OrderModel.id == order_id.value)
            .values(status=status.value)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: OrderModel) -> Order:
        return Order(
            id=OrderId(value=model.id),
            order_number=model.order_number,
            customer_id=model.customer_id,
            customer_email=model.customer_email,
            customer_name=model.customer_name,
            items=tuple(
                OrderItem(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=float(item.unit_price),
                )
                for item in model.items
            ),
            discount_amount=float(model.discount_amount),
            coupon_code=model.coupon_code,
            status=OrderStatus(model.status),
            currency=model.currency,
            payment_method=model.payment_method,
            shipping_address=model.shipping_address,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
