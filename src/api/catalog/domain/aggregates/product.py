"""Product aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime

from catalog.domain.value_objects import (
    CategoryId,
    ProductId,
    ProductImage,
    ProductStatus,
    SubcategoryId,
    slugify,
)

DEFAULT_CURRENCY = "LKR"


@dataclass(frozen=True)
class Product:
    """A sellable item.

    Business rules:
    - Price and stock are never negative
    - Only ACTIVE products appear on the storefront
    - Orders always take the price from here, never from the client
    """

    id: ProductId
    name: str
    slug: str
    price: float
    category_id: CategoryId
    subcategory_id: SubcategoryId | None = None
    description: str | None = None
    currency: str = DEFAULT_CURRENCY
    status: ProductStatus = ProductStatus.ACTIVE
    stock: int = 0
    featured: bool = False
    images: tuple[ProductImage, ...] = field(default_factory=tuple)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Name is required")
        if not self.slug:
            raise ValueError("Slug is required")
        if self.price < 0:
            raise ValueError("Price must be zero or greater")
        if self.stock < 0:
            raise ValueError("Stock must be zero or greater")

    @classmethod
    def create(
        cls,
        name: str,
        price: float,
        category_id: CategoryId,
        slug: str | None = None,
        **fields,
    ) -> Product:
        """Create a product; the slug defaults to the slugified name.

        Raises:
            ValueError: If a field breaks a business rule
        """
        return cls(
            id=ProductId.generate(),
            name=name.strip(),
            slug=slugify(slug or name),
            price=price,
            category_id=category_id,
            **fields,
        )

    @property
    def is_visible(self) -> bool:
        return self.status is ProductStatus.ACTIVE

    @property
    def primary_image(self) -> ProductImage | None:
        if not self.images:
            return None
        return min(self.images, key=lambda image: image.position)

    def updated(self, **changes) -> Product:
        """Return a copy with ``changes`` applied and re-validated.

        ``None`` values are ignored so partial updates can pass every field.
        """
        changes = {key: value for key, value in changes.items() if value is not None}
        if "slug" in changes:
            changes["slug"] = slugify(changes["slug"])
        if "name" in changes:
            changes["name"] = changes["name"].strip()
        return replace(self, **changes)
