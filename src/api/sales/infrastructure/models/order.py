"""SQLAlchemy ORM models for orders and order items."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin


class OrderModel(Base, TimestampMixin):
    """ORM model for orders table.

    Customer name and email are copied at placement so reports do not
    depend on the current user profile.
    """

    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    order_number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    customer_id: Mapped[str] = mapped_column(String(26), nullable=False, index=True)
    customer_email: Mapped[str] = mapped_column(String(320), nullable=False)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending", index=True
    )
    subtotal: Mapped[float] = mapped_column(nullable=False)
    discount_amount: Mapped[float] = mapped_column(nullable=False, default=0)
    total_amount: Mapped[float] = mapped_column(nullable=False)
    coupon_code: Mapped[str | None] = mapped_column(String(64), nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="LKR")
    payment_method: Mapped[str] = mapped_column(
        String(32), nullable=False, default="cod"
    )
    shipping_address: Mapped[dict[str, Any] | None] = mapped_column(nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    items: Mapped[list[OrderItemModel]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderItemModel.position",
    )

    def __repr__(self) -> str:
        return f"<OrderModel(id={self.id}, order_number={self.order_number})>"


class OrderItemModel(Base):
    """ORM model for order_items table."""

    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    product_id: Mapped[str] = mapped_column(String(26), nullable=False)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[float] = mapped_column(nullable=False)
    line_total: Mapped[float] = mapped_column(nullable=False)

    order: Mapped[OrderModel] = relationship(back_populates="items")
