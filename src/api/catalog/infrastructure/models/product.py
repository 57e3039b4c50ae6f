"""SQLAlchemy ORM model for the products table."""

from typing import Any

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ProductModel(Base, TimestampMixin):
    """ORM model for products table.

    Images are stored inline as a JSON list of ``{url, alt, position}``.
    Category deletion is RESTRICTed while products reference it.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="LKR")
    category_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    subcategory_id: Mapped[str | None] = mapped_column(
        String(26),
        ForeignKey("subcategories.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active", index=True
    )
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    images: Mapped[list[dict[str, Any]]] = mapped_column(nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, slug={self.slug}, status={self.status})>"
