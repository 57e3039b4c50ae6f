"""Coupon routes.

Customers validate codes against their cart; admins manage coupons.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from iam.application.security import require_authenticated
from iam.dependencies.user import AdminIdentity, OptionalIdentity
from sales.application.services import CouponService
from sales.dependencies.coupon import get_coupon_service
from sales.domain.value_objects import CouponId, CouponRejection
from sales.ports.exceptions import (
    CouponNotFoundError,
    CouponRejectedError,
    DuplicateCouponCodeError,
)
from sales.presentation.coupons.models import (
    CouponResponse,
    CreateCouponRequest,
    UpdateCouponRequest,
    ValidateCouponRequest,
    ValidateCouponResponse,
)
from shared_kernel.api_models import SuccessResponse, parse_entity_id
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(tags=["coupons"])

CouponServiceDep = Annotated[CouponService, Depends(get_coupon_service)]


@router.post(
    "/coupons/validate",
    response_model=ValidateCouponResponse,
    summary="Validate a coupon for an order total",
    description="Checks the coupon and prices the discount without redeeming it.",
    responses={
        400: {"description": "Missing fields or coupon not applicable"},
        401: {"description": "Authentication required"},
        404: {"description": "Unknown coupon code"},
    },
)
async def validate_coupon(
    request: ValidateCouponRequest,
    identity: OptionalIdentity,
    service: CouponServiceDep,
) -> ValidateCouponResponse:
    identity = require_authenticated(
        identity, error="You must be logged in to use coupons"
    )
    if not request.code or not request.code.strip():
        raise ValidationError("Coupon code is required")
    if request.order_total is None or request.order_total <= 0:
        raise ValidationError("Invalid order total")

    try:
        quote = await service.validate_coupon(
            code=request.code,
            order_total=request.order_total,
            customer_email=identity.email,
        )
        return ValidateCouponResponse.from_quote(quote)
    except CouponRejectedError as e:
        if e.reason is CouponRejection.NOT_FOUND:
            raise NotFoundError(e.message)
        raise ValidationError(e.message)
    except Exception as e:
        logger.error("coupon_validation_failed", error=str(e))
        raise UnexpectedError("Failed to validate coupon")


@router.get(
    "/admin/coupons",
    response_model=list[CouponResponse],
    summary="List coupons",
    description="All coupons, newest first.",
)
async def list_coupons(
    admin: AdminIdentity, service: CouponServiceDep
) -> list[CouponResponse]:
    try:
        coupons = await service.list_coupons()
        return [CouponResponse.from_domain(coupon) for coupon in coupons]
    except Exception as e:
        logger.error("coupon_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch coupons")


@router.post(
    "/admin/coupons",
    response_model=CouponResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a coupon",
    responses={400: {"description": "Validation error or duplicate code"}},
)
async def create_coupon(
    request: CreateCouponRequest,
    admin: AdminIdentity,
    service: CouponServiceDep,
) -> CouponResponse:
    try:
        coupon = await service.create_coupon(
            code=request.code,
            discount_type=request.discount_type,
            discount_value=request.discount_value,
            expiry_date=request.expiry_date,
            usage_limit=request.usage_limit,
            minimum_order=request.minimum_order,
            status=request.status,
            usage_type=request.usage_type,
            max_uses_per_user=request.max_uses_per_user,
        )
        return CouponResponse.from_domain(coupon)
    except (DuplicateCouponCodeError, ValueError) as e:
        raise ValidationError(str(e))
    except Exception as e:
        logger.error("coupon_create_failed", error=str(e))
        raise UnexpectedError("Failed to create coupon")


@router.put(
    "/admin/coupons/{coupon_id}",
    response_model=CouponResponse,
    summary="Update a coupon",
    responses={
        400: {"description": "Validation error or duplicate code"},
        404: {"description": "Coupon not found"},
    },
)
async def update_coupon(
    coupon_id: str,
    request: UpdateCouponRequest,
    admin: AdminIdentity,
    service: CouponServiceDep,
) -> CouponResponse:
    coupon_id_obj = parse_entity_id(CouponId, coupon_id, "coupon ID")
    try:
        coupon = await service.update_coupon(
            coupon_id_obj, **request.model_dump(exclude_unset=True)
        )
        return CouponResponse.from_domain(coupon)
    except CouponNotFoundError:
        raise NotFoundError("Coupon not found")
    except (DuplicateCouponCodeError, ValueError) as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("coupon_update_failed", coupon_id=coupon_id, error=str(e))
        raise UnexpectedError("Failed to update coupon")


@router.delete(
    "/admin/coupons/{coupon_id}",
    response_model=SuccessResponse,
    summary="Delete a coupon",
    responses={404: {"description": "Coupon not found"}},
)
async def delete_coupon(
    coupon_id: str,
    admin: AdminIdentity,
    service: CouponServiceDep,
) -> SuccessResponse:
    coupon_id_obj = parse_entity_id(CouponId, coupon_id, "coupon ID")
    try:
        await service.delete_coupon(coupon_id_obj)
        return SuccessResponse()
    except CouponNotFoundError:
        raise NotFoundError("Coupon not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error("coupon_delete_failed", coupon_id=coupon_id, error=str(e))
        raise UnexpectedError("Failed to delete coupon")
