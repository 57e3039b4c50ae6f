"""Request and response models for admin user management."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from iam.application.value_objects import UserPage
from iam.domain.aggregates import User
from shared_kernel.api_models import APIModel


class UserAction(StrEnum):
    """Supported PATCH actions."""

    UPDATE_ROLE = "updateRole"
    UPDATE_PROFILE = "updateProfile"


class UpdateUserRequest(APIModel):
    """PATCH body; which fields matter depends on ``action``.

    Attributes:
        action: updateRole or updateProfile
        role: New role for updateRole
        name: New display name for updateProfile (at least 2 characters)
        phone: New phone for updateProfile
        address: New address for updateProfile
    """

    action: str = Field(..., description="updateRole or updateProfile")
    role: str | None = Field(default=None, examples=["admin", "customer"])
    name: str | None = None
    phone: str | None = None
    address: str | None = None


class UserResponse(APIModel):
    id: str = Field(..., description="User ID (ULID)")
    email: str
    name: str
    role: str
    phone: str | None = None
    address: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        return cls(
            id=user.id.value,
            email=user.email,
            name=user.name,
            role=user.role.value,
            phone=user.phone,
            address=user.address,
            created_at=user.created_at,
        )


class PaginationResponse(APIModel):
    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class UserListResponse(APIModel):
    users: list[UserResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: UserPage) -> UserListResponse:
        return cls(
            users=[UserResponse.from_domain(user) for user in page.users],
            pagination=PaginationResponse(
                page=page.page,
                limit=page.limit,
                total_count=page.total,
                total_pages=page.total_pages,
                has_next_page=page.has_next_page,
                has_prev_page=page.has_prev_page,
            ),
        )


class UserDetailResponse(APIModel):
    user: UserResponse
