"""Hero banner routes."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from catalog.application.services import HeroBannerService
from catalog.dependencies.product import get_hero_banner_service
from catalog.domain.value_objects import HeroBannerId
from catalog.ports.exceptions import HeroBannerNotFoundError
from catalog.presentation.hero_banners.models import (
    CreateHeroBannerRequest,
    HeroBannerResponse,
    UpdateHeroBannerRequest,
)
from iam.dependencies.user import AdminIdentity
from shared_kernel.api_models import SuccessResponse, parse_entity_id
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(tags=["hero-banners"])

HeroBannerServiceDep = Annotated[HeroBannerService, Depends(get_hero_banner_service)]


@router.get(
    "/hero-banners",
    response_model=list[HeroBannerResponse],
    summary="List active hero banners",
    description="Active banners ordered by position.",
)
async def list_active_banners(
    service: HeroBannerServiceDep,
) -> list[HeroBannerResponse]:
    try:
        banners = await service.list_banners(active_only=True)
        return [HeroBannerResponse.from_domain(banner) for banner in banners]
    except Exception as e:
        logger.error("hero_banner_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch hero banners")


@router.get(
    "/admin/hero-banners",
    response_model=list[HeroBannerResponse],
    summary="List every hero banner",
)
async def list_all_banners(
    admin: AdminIdentity,
    service: HeroBannerServiceDep,
) -> list[HeroBannerResponse]:
    try:
        banners = await service.list_banners(active_only=False)
        return [HeroBannerResponse.from_domain(banner) for banner in banners]
    except Exception as e:
        logger.error("hero_banner_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch hero banners")


@router.post(
    "/admin/hero-banners",
    response_model=HeroBannerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a hero banner",
)
async def create_banner(
    request: CreateHeroBannerRequest,
    admin: AdminIdentity,
    service: HeroBannerServiceDep,
) -> HeroBannerResponse:
    try:
        banner = await service.create_banner(**request.model_dump())
        return HeroBannerResponse.from_domain(banner)
    except ValueError as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("hero_banner_create_failed", error=str(e))
        raise UnexpectedError("Failed to create hero banner")


@router.put(
    "/admin/hero-banners/{banner_id}",
    response_model=HeroBannerResponse,
    summary="Update a hero banner",
    responses={404: {"description": "Hero banner not found"}},
)
async def update_banner(
    banner_id: str,
    request: UpdateHeroBannerRequest,
    admin: AdminIdentity,
    service: HeroBannerServiceDep,
) -> HeroBannerResponse:
    banner_id_obj = parse_entity_id(HeroBannerId, banner_id, "hero banner ID")
    try:
        banner = await service.update_banner(banner_id_obj, **request.model_dump())
        return HeroBannerResponse.from_domain(banner)
    except HeroBannerNotFoundError:
        raise NotFoundError("Hero banner not found")
    except ValueError as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("hero_banner_update_failed", banner_id=banner_id, error=str(e))
        raise UnexpectedError("Failed to update hero banner")


@router.delete(
    "/admin/hero-banners/{banner_id}",
    response_model=SuccessResponse,
    summary="Delete a hero banner",
    responses={404: {"description": "Hero banner not found"}},
)
async def delete_banner(
    banner_id: str,
    admin: AdminIdentity,
    service: HeroBannerServiceDep,
) -> SuccessResponse:
    banner_id_obj = parse_entity_id(HeroBannerId, banner_id, "hero banner ID")
    try:
        await service.delete_banner(banner_id_obj)
        return SuccessResponse()
    except HeroBannerNotFoundError:
        raise NotFoundError("Hero banner not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error("hero_banner_delete_failed", banner_id=banner_id, error=str(e))
        raise UnexpectedError("Failed to delete hero banner")
