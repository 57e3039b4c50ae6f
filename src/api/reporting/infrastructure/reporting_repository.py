"""PostgreSQL implementation of IReportingRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.infrastructure.models import CategoryModel, ProductModel
from iam.infrastructure.models import UserModel
from messaging.infrastructure.models import MessageModel
from reporting.domain.value_objects import OrderExportRow, ProductSummary, StoreCounts
from reporting.ports.repositories import IReportingRepository
from sales.infrastructure.models import CouponModel, OrderModel


class ReportingRepository(IReportingRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _count(self, model, *criteria) -> int:
        stmt = select(func.count()).select_from(model)
        if criteria:
            stmt = stmt.where(*criteria)
        return (await self._session.execute(stmt)).scalar_one()

    async def store_counts(self, now: datetime) -> StoreCounts:
        sales_stmt = select(func.coalesce(func.sum(OrderModel.total_amount), 0)).where(
            OrderModel.status != "cancelled"
        )
        total_sales = (await self._session.execute(sales_stmt)).scalar_one()

        message_stmt = select(MessageModel.status, func.count()).group_by(
            MessageModel.status
        )
        messages = dict((await self._session.execute(message_stmt)).all())

        return StoreCounts(
            total_products=await self._count(ProductModel),
            active_products=await self._count(
                ProductModel, ProductModel.status == "active"
            ),
            total_categories=await self._count(CategoryModel),
            total_customers=await self._count(UserModel, UserModel.role != "admin"),
            total_orders=await self._count(OrderModel),
            pending_orders=await self._count(
                OrderModel, OrderModel.status == "pending"
            ),
            completed_orders=await self._count(
                OrderModel, OrderModel.status == "completed"
            ),
            total_coupons=await self._count(CouponModel),
            active_coupons=await self._count(
                CouponModel,
                CouponModel.status == "active",
                CouponModel.expiry_date >= now,
            ),
            total_sales=float(total_sales),
            messages_new=messages.get("new", 0),
            messages_read=messages.get("read", 0),
            messages_replied=messages.get("replied", 0),
        )

    async def recent_products(self, limit: int) -> list[ProductSummary]:
        stmt = (
            select(ProductModel).order_by(ProductModel.created_at.desc()).limit(limit)
        )
        result = await self._session.execute(stmt)
        return [
            ProductSummary(
                id=model.id,
                name=model.name,
                price=float(model.price),
                stock=model.stock,
                images=list(model.images or []),
            )
            for model in result.scalars().all()
        ]

    async def orders_for_export(self) -> list[OrderExportRow]:
        stmt = (
            select(OrderModel, UserModel.phone, UserModel.address)
            .outerjoin(UserModel, UserModel.id == OrderModel.customer_id)
            .order_by(OrderModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [
            OrderExportRow(
                order_number=order.order_number,
                status=order.status,
                created_at=order.created_at,
                customer_name=order.customer_name,
                customer_email=order.customer_email,
                total_amount=float(order.total_amount),
                payment_method=order.payment_method,
                items=[(item.product_name, item.quantity) for item in order.items],
                shipping_address=order.shipping_address,
                notes=order.notes,
                profile_phone=phone,
                profile_address=address,
            )
            for order, phone, address in result.all()
        ]
