"""Request and response models for hero banner endpoints."""

from __future__ import annotations

from pydantic import Field

from catalog.domain.aggregates import HeroBanner
from shared_kernel.api_models import APIModel


class CreateHeroBannerRequest(APIModel):
    title: str = Field(..., min_length=1, max_length=255)
    image_url: str = Field(..., min_length=1)
    subtitle: str | None = None
    cta_text: str | None = Field(default=None, description='Defaults to "Shop Now"')
    cta_link: str | None = Field(default=None, description='Defaults to "/products"')
    position: int | None = Field(default=None, ge=0)
    is_active: bool | None = None
    show_badge: bool | None = None
    show_top_rated: bool | None = None


class UpdateHeroBannerRequest(APIModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    image_url: str | None = Field(default=None, min_length=1)
    subtitle: str | None = None
    cta_text: str | None = None
    cta_link: str | None = None
    position: int | None = Field(default=None, ge=0)
    is_active: bool | None = None
    show_badge: bool | None = None
    show_top_rated: bool | None = None


class HeroBannerResponse(APIModel):
    id: str
    title: str
    subtitle: str | None = None
    image_url: str
    cta_text: str
    cta_link: str
    position: int
    is_active: bool
    show_badge: bool
    show_top_rated: bool

    @classmethod
    def from_domain(cls, banner: HeroBanner) -> HeroBannerResponse:
        return cls(
            id=banner.id.value,
            title=banner.title,
            subtitle=banner.subtitle,
            image_url=banner.image_url,
            cta_text=banner.cta_text,
            cta_link=banner.cta_link,
            position=banner.position,
            is_active=banner.is_active,
            show_badge=banner.show_badge,
            show_top_rated=banner.show_top_rated,
        )
