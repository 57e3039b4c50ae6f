"""SQLAlchemy ORM model for the inventory_items table."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class InventoryItemModel(Base, TimestampMixin):
    """ORM model for inventory_items table."""

    __tablename__ = "inventory_items"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, default="General", index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unit: Mapped[str] = mapped_column(String(32), nullable=False, default="pcs")
    low_stock_alert: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    cost_per_unit: Mapped[float | None] = mapped_column(nullable=True)
    supplier: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<InventoryItemModel(id={self.id}, name={self.name})>"
