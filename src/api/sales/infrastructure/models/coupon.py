"""SQLAlchemy ORM models for coupons and their redemptions."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class CouponModel(Base, TimestampMixin):
    """ORM model for coupons table.

    ``times_used`` is only ever incremented by a conditional UPDATE so
    concurrent redemptions cannot overrun ``usage_limit``.
    """

    __tablename__ = "coupons"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    code: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    discount_type: Mapped[str] = mapped_column(String(20), nullable=False)
    discount_value: Mapped[float] = mapped_column(nullable=False)
    expiry_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    usage_limit: Mapped[int] = mapped_column(Integer, nullable=False, default=100)
    times_used: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    minimum_order: Mapped[float] = mapped_column(nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    usage_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="multi_use"
    )
    max_uses_per_user: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    def __repr__(self) -> str:
        return f"<CouponModel(id={self.id}, code={self.code})>"


class CouponUsageModel(Base, TimestampMixin):
    """ORM model for coupon_usages table.

    Keyed by email so deleting and re-creating an account does not reset
    per-customer limits.
    """

    __tablename__ = "coupon_usages"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    coupon_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("coupons.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    customer_id: Mapped[str] = mapped_column(String(26), nullable=False)
    customer_email: Mapped[str] = mapped_column(
        String(320), nullable=False, index=True
    )
    order_id: Mapped[str] = mapped_column(
        String(26), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"<CouponUsageModel(coupon_id={self.coupon_id}, "
            f"order_id={self.order_id})>"
        )
