"""IAM presentation layer.

Organized by concern: ``auth`` (sign-in and current identity),
``profile`` (self-service profile) and ``users`` (admin user
management). Each package holds its routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from iam.presentation.auth.routes import router as auth_router
from iam.presentation.profile.routes import router as profile_router
from iam.presentation.users.routes import router as users_router

# Auth is enforced per-endpoint: login and current-user are public.
router = APIRouter()

router.include_router(auth_router)
router.include_router(profile_router)
router.include_router(users_router)

__all__ = ["router"]
