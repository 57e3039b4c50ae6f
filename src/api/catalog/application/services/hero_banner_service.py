"""Hero banner application service."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.observability import (
    CatalogServiceProbe,
    DefaultCatalogServiceProbe,
)
from catalog.domain.aggregates import HeroBanner
from catalog.domain.value_objects import HeroBannerId
from catalog.ports.exceptions import HeroBannerNotFoundError
from catalog.ports.repositories import IHeroBannerRepository


class HeroBannerService:
    def __init__(
        self,
        session: AsyncSession,
        banner_repository: IHeroBannerRepository,
        probe: CatalogServiceProbe | None = None,
    ):
        self._session = session
        self._banners = banner_repository
        self._probe = probe or DefaultCatalogServiceProbe()

    async def list_banners(self, active_only: bool = True) -> list[HeroBanner]:
        """List banners by position; the storefront only sees active ones."""
        async with self._session.begin():
            return await self._banners.list_all(active_only=active_only)

    async def create_banner(
        self, title: str, image_url: str, **fields: Any
    ) -> HeroBanner:
        """Create a banner.

        Raises:
            ValueError: If the title or image URL is blank
        """
        fields = {key: value for key, value in fields.items() if value is not None}
        banner = HeroBanner.create(title=title, image_url=image_url, **fields)
        async with self._session.begin():
            await self._banners.save(banner)

        self._probe.hero_banner_saved(banner_id=banner.id.value, created=True)
        return banner

    async def update_banner(
        self, banner_id: HeroBannerId, **changes: Any
    ) -> HeroBanner:
        async with self._session.begin():
            banner = await self._banners.get_by_id(banner_id)
            if banner is None:
                raise HeroBannerNotFoundError(f"Hero banner {banner_id} not found")
            updated = banner.updated(**changes)
            await self._banners.save(updated)

        self._probe.hero_banner_saved(banner_id=banner_id.value, created=False)
        return updated

    async def delete_banner(self, banner_id: HeroBannerId) -> None:
        async with self._session.begin():
            if not await self._banners.delete(banner_id):
                raise HeroBannerNotFoundError(f"Hero banner {banner_id} not found")
        self._probe.hero_banner_deleted(banner_id=banner_id.value)
