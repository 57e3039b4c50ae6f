"""Request and response models for the caller's own profile."""

from __future__ import annotations

from iam.domain.aggregates import User
from iam.presentation.users.models import UserResponse
from shared_kernel.api_models import APIModel


class UpdateProfileRequest(APIModel):
    """PUT body; omitted fields keep their current value.

    Attributes:
        name: New display name (at least 2 characters)
        phone: New phone number
        address: New postal address
    """

    name: str | None = None
    phone: str | None = None
    address: str | None = None


class ProfileUpdatedResponse(APIModel):
    success: bool = True
    user: UserResponse
    message: str = "Profile updated successfully"

    @classmethod
    def from_domain(cls, user: User) -> ProfileUpdatedResponse:
        return cls(user=UserResponse.from_domain(user))
