"""PostgreSQL implementation of IHeroBannerRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.aggregates import HeroBanner
from catalog.domain.value_objects import HeroBannerId
from catalog.infrastructure.models import HeroBannerModel
from catalog.ports.repositories import IHeroBannerRepository

_FIELDS = (
    "title",
    "subtitle",
    "image_url",
    "cta_text",
    "cta_link",
    "position",
    "is_active",
    "show_badge",
    "show_top_rated",
)


class HeroBannerRepository(IHeroBannerRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, banner: HeroBanner) -> None:
        model = await self._session.get(HeroBannerModel, banner.id.value)
        if model is None:
            model = HeroBannerModel(id=banner.id.value)
            self._session.add(model)

        for name in _FIELDS:
            setattr(model, name, getattr(banner, name))
        await self._session.flush()

    async def get_by_id(self, banner_id: HeroBannerId) -> HeroBanner | None:
        model = await self._session.get(HeroBannerModel, banner_id.value)
        return self._to_domain(model) if model else None

    async def list_all(self, active_only: bool = False) -> list[HeroBanner]:
        stmt = select(HeroBannerModel).order_by(
            HeroBannerModel.position, HeroBannerModel.created_at
        )
        if active_only:
            stmt = stmt.where(HeroBannerModel.is_active.is_(True))
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, banner_id: HeroBannerId) -> bool:
        stmt = delete(HeroBannerModel).where(HeroBannerModel.id == banner_id.value)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: HeroBannerModel) -> HeroBanner:
        return HeroBanner(
            id=HeroBannerId(value=model.id),
            created_at=model.created_at,
            **{name: getattr(model, name) for name in _FIELDS},
        )
