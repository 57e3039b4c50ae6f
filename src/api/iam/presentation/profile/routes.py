"""Self-service profile routes for any signed-in user."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException

from iam.application.services import UserService
from iam.dependencies.user import CurrentIdentity, get_user_service
from iam.ports.exceptions import InvalidProfileError, UserNotFoundError
from iam.presentation.profile.models import (
    ProfileUpdatedResponse,
    UpdateProfileRequest,
)
from iam.presentation.users.models import UserResponse
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(
    prefix="/user/profile",
    tags=["profile"],
)

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.get(
    "",
    response_model=UserResponse,
    summary="Get my profile",
    responses={
        200: {"description": "The caller's profile"},
        401: {"description": "Authentication required"},
        404: {"description": "User not found"},
    },
)
async def get_profile(
    identity: CurrentIdentity,
    service: UserServiceDep,
) -> UserResponse:
    try:
        user = await service.get_user(identity.user_id)
        return UserResponse.from_domain(user)
    except UserNotFoundError:
        raise NotFoundError("User not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "profile_fetch_failed", user_id=identity.user_id.value, error=str(e)
        )
        raise UnexpectedError("Failed to fetch profile")


@router.put(
    "",
    response_model=ProfileUpdatedResponse,
    summary="Update my profile",
    description="Changes any of `name` (at least 2 characters), `phone`, "
    "`address`. Role and email cannot be changed here.",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid field"},
        401: {"description": "Authentication required"},
        404: {"description": "User not found"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    identity: CurrentIdentity,
    service: UserServiceDep,
) -> ProfileUpdatedResponse:
    try:
        user = await service.update_profile(
            identity.user_id,
            name=request.name,
            phone=request.phone,
            address=request.address,
        )
        return ProfileUpdatedResponse.from_domain(user)
    except UserNotFoundError:
        raise NotFoundError("User not found")
    except InvalidProfileError as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            "profile_update_failed", user_id=identity.user_id.value, error=str(e)
        )
        raise UnexpectedError("Failed to update profile")
