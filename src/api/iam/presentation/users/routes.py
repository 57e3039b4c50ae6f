"""Admin user management routes."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from iam.application.services import UserService
from iam.dependencies.user import AdminIdentity, get_user_service
from iam.domain.value_objects import Role, UserId
from iam.ports.exceptions import InvalidProfileError, UserNotFoundError
from iam.presentation.users.models import (
    UpdateUserRequest,
    UserAction,
    UserDetailResponse,
    UserListResponse,
    UserResponse,
)
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(
    prefix="/admin/users",
    tags=["users"],
)


def _parse_user_id(user_id: str) -> UserId:
    try:
        return UserId.from_string(user_id)
    except ValueError:
        raise ValidationError("Invalid user ID format")


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
    description="Newest first. `limit` is clamped to 1..500.",
    responses={
        200: {"description": "One page of users"},
        401: {"description": "Authentication required"},
        403: {"description": "Admin role required"},
    },
)
async def list_users(
    admin: AdminIdentity,
    service: Annotated[UserService, Depends(get_user_service)],
    page: Annotated[int, Query(description="1-based page number")] = 1,
    limit: Annotated[int, Query(description="Page size")] = 20,
) -> UserListResponse:
    """List users for the back-office."""
    try:
        user_page = await service.list_users(page=page, limit=limit)
        return UserListResponse.from_page(user_page)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("user_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch users")


@router.get(
    "/{user_id}",
    response_model=UserDetailResponse,
    summary="Get user by ID",
    responses={
        200: {"description": "User found"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: str,
    admin: AdminIdentity,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserDetailResponse:
    user_id_obj = _parse_user_id(user_id)
    try:
        user = await service.get_user(user_id_obj)
        return UserDetailResponse(user=UserResponse.from_domain(user))
    except UserNotFoundError:
        raise NotFoundError("User not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error("user_fetch_failed", user_id=user_id, error=str(e))
        raise UnexpectedError("Failed to fetch user")


@router.patch(
    "/{user_id}",
    response_model=UserDetailResponse,
    summary="Update a user's role or profile",
    description="""
`action` selects the change:

- `updateRole`: `role` must be `admin` or `customer`
- `updateProfile`: any of `name` (at least 2 characters), `phone`, `address`
""",
    responses={
        200: {"description": "User updated"},
        400: {"description": "Unknown action or invalid field"},
        404: {"description": "User not found"},
    },
)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    admin: AdminIdentity,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserDetailResponse:
    """Apply one admin action to a user."""
    user_id_obj = _parse_user_id(user_id)

    try:
        if request.action == UserAction.UPDATE_ROLE:
            try:
                role = Role(request.role or "")
            except ValueError:
                raise ValidationError("Invalid role")
            user = await service.change_role(user_id_obj, role)
        elif request.action == UserAction.UPDATE_PROFILE:
            user = await service.update_profile(
                user_id_obj,
                name=request.name,
                phone=request.phone,
                address=request.address,
            )
        else:
            raise ValidationError("Invalid action")

        return UserDetailResponse(user=UserResponse.from_domain(user))

    except UserNotFoundError:
        raise NotFoundError("User not found")
    except InvalidProfileError as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("user_update_failed", user_id=user_id, error=str(e))
        raise UnexpectedError("Failed to update user")
