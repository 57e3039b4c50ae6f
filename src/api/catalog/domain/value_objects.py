"""Value objects for the catalog domain."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from shared_kernel.identifiers import EntityId


@dataclass(frozen=True)
class CategoryId(EntityId):
    pass


@dataclass(frozen=True)
class SubcategoryId(EntityId):
    pass


@dataclass(frozen=True)
class ProductId(EntityId):
    pass


@dataclass(frozen=True)
class HeroBannerId(EntityId):
    pass


class ProductStatus(StrEnum):
    """Only active products are visible on the storefront."""

    ACTIVE = "active"
    DRAFT = "draft"
    ARCHIVED = "archived"


@dataclass(frozen=True)
class ProductImage:
    """One product picture; lower positions are shown first."""

    url: str
    alt: str | None = None
    position: int = 0


_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lower-case, hyphen-separated form of ``text``.

    Example:
        >>> slugify("Men's Shoes & Boots")
        'men-s-shoes-boots'
    """
    return _NON_SLUG_CHARS.sub("-", text.lower()).strip("-")
