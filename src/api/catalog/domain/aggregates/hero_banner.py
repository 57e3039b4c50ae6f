"""HeroBanner aggregate: a storefront home-page slide."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from catalog.domain.value_objects import HeroBannerId


@dataclass(frozen=True)
class HeroBanner:
    id: HeroBannerId
    title: str
    image_url: str
    subtitle: str | None = None
    cta_text: str = "Shop Now"
    cta_link: str = "/products"
    position: int = 0
    is_active: bool = True
    show_badge: bool = True
    show_top_rated: bool = True
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("Title is required")
        if not self.image_url.strip():
            raise ValueError("Image URL is required")

    @classmethod
    def create(cls, title: str, image_url: str, **fields) -> HeroBanner:
        return cls(
            id=HeroBannerId.generate(), title=title, image_url=image_url, **fields
        )

    def updated(self, **changes) -> HeroBanner:
        changes = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **changes)
