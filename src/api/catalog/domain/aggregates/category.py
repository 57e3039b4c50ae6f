"""Category and Subcategory aggregates."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from catalog.domain.value_objects import CategoryId, SubcategoryId, slugify


def _require_name_and_slug(name: str, slug: str | None) -> tuple[str, str]:
    name = name.strip()
    if not name:
        raise ValueError("Name is required")
    slug = slugify(slug) if slug else slugify(name)
    if not slug:
        raise ValueError("Slug is required")
    return name, slug


@dataclass(frozen=True)
class Category:
    """Top-level product grouping.

    Business rules:
    - Slugs are unique across categories (enforced by storage)
    - A category cannot be deleted while products reference it
    """

    id: CategoryId
    name: str
    slug: str
    description: str | None = None
    image: str | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        name: str,
        slug: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> Category:
        """Create a category; the slug defaults to the slugified name.

        Raises:
            ValueError: If the name is blank
        """
        name, slug = _require_name_and_slug(name, slug)
        return cls(
            id=CategoryId.generate(),
            name=name,
            slug=slug,
            description=description,
            image=image,
        )

    def updated(
        self,
        name: str | None = None,
        slug: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> Category:
        """Return a copy with the provided fields changed."""
        new_name, new_slug = _require_name_and_slug(
            name if name is not None else self.name,
            slug if slug is not None else self.slug,
        )
        return replace(
            self,
            name=new_name,
            slug=new_slug,
            description=description if description is not None else self.description,
            image=image if image is not None else self.image,
        )


@dataclass(frozen=True)
class Subcategory:
    """Second-level grouping; slugs are unique within the parent category."""

    id: SubcategoryId
    category_id: CategoryId
    name: str
    slug: str
    description: str | None = None
    image: str | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        category_id: CategoryId,
        name: str,
        slug: str,
        description: str | None = None,
        image: str | None = None,
    ) -> Subcategory:
        name, slug = _require_name_and_slug(name, slug)
        return cls(
            id=SubcategoryId.generate(),
            category_id=category_id,
            name=name,
            slug=slug,
            description=description,
            image=image,
        )

    def updated(
        self,
        category_id: CategoryId | None = None,
        name: str | None = None,
        slug: str | None = None,
        description: str | None = None,
        image: str | None = None,
    ) -> Subcategory:
        new_name, new_slug = _require_name_and_slug(
            name if name is not None else self.name,
            slug if slug is not None else self.slug,
        )
        return replace(
            self,
            category_id=category_id or self.category_id,
            name=new_name,
            slug=new_slug,
            description=description if description is not None else self.description,
            image=image if image is not None else self.image,
        )
