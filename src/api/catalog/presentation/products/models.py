"""Request and response models for product endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from catalog.domain.aggregates import Product
from catalog.domain.value_objects import ProductImage, ProductStatus
from shared_kernel.api_models import APIModel


class ProductImageModel(APIModel):
    url: str = Field(..., min_length=1)
    alt: str | None = None
    position: int = Field(default=0, ge=0)

    def to_domain(self) -> ProductImage:
        return ProductImage(url=self.url, alt=self.alt, position=self.position)


class CreateProductRequest(APIModel):
    """Request to create a product.

    Attributes:
        name: Display name
        slug: URL slug; derived from the name when omitted
        price: Unit price, zero or greater
        category_id: Owning category (ULID)
        subcategory_id: Optional subcategory of that category (ULID)
        status: active, draft or archived
        stock: Units on hand, zero or greater
        featured: Whether the product is listed on the home page
        images: Pictures, shown by ascending position
    """

    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    currency: str = Field(default="LKR", min_length=3, max_length=3)
    category_id: str
    subcategory_id: str | None = None
    status: ProductStatus = ProductStatus.ACTIVE
    stock: int = Field(default=0, ge=0)
    featured: bool = False
    images: list[ProductImageModel] = Field(default_factory=list)


class UpdateProductRequest(APIModel):
    """Partial update; omitted fields keep their value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    category_id: str | None = None
    subcategory_id: str | None = None
    status: ProductStatus | None = None
    stock: int | None = Field(default=None, ge=0)
    featured: bool | None = None
    images: list[ProductImageModel] | None = None


class ProductResponse(APIModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    price: float
    currency: str
    category_id: str
    subcategory_id: str | None = None
    status: str
    stock: int
    featured: bool
    images: list[ProductImageModel]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, product: Product) -> ProductResponse:
        return cls(
            id=product.id.value,
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price,
            currency=product.currency,
            category_id=product.category_id.value,
            subcategory_id=(
                product.subcategory_id.value if product.subcategory_id else None
            ),
            status=product.status.value,
            stock=product.stock,
            featured=product.featured,
            images=[
                ProductImageModel(url=image.url, alt=image.alt, position=image.position)
                for image in sorted(product.images, key=lambda image: image.position)
            ],
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
