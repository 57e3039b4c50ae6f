"""Request and response models for category and subcategory endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from catalog.domain.aggregates import Category, Subcategory
from shared_kernel.api_models import APIModel


class CreateCategoryRequest(APIModel):
    """Request to create a category.

    Attributes:
        name: Display name
        slug: URL slug; derived from the name when omitted
        description: Optional description
        image: Optional image URL
    """

    name: str = Field(..., min_length=1, max_length=255, examples=["Electronics"])
    slug: str | None = Field(default=None, max_length=255, examples=["electronics"])
    description: str | None = None
    image: str | None = None


class UpdateCategoryRequest(APIModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    image: str | None = None


class CategoryResponse(APIModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    image: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, category: Category) -> CategoryResponse:
        return cls(
            id=category.id.value,
            name=category.name,
            slug=category.slug,
            description=category.description,
            image=category.image,
            created_at=category.created_at,
        )


class CreateSubcategoryRequest(APIModel):
    """Request to create a subcategory.

    Fields are optional here so a missing one yields the API's own 400
    message instead of a schema error.
    """

    category_id: str | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    image: str | None = None


class UpdateSubcategoryRequest(APIModel):
    category_id: str | None = None
    name: str | None = Field(default=None, min_length=1)
    slug: str | None = Field(default=None, min_length=1)
    description: str | None = None
    image: str | None = None


class SubcategoryResponse(APIModel):
    id: str
    category_id: str
    name: str
    slug: str
    description: str | None = None
    image: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, subcategory: Subcategory) -> SubcategoryResponse:
        return cls(
            id=subcategory.id.value,
            category_id=subcategory.category_id.value,
            name=subcategory.name,
            slug=subcategory.slug,
            description=subcategory.description,
            image=subcategory.image,
            created_at=subcategory.created_at,
        )
