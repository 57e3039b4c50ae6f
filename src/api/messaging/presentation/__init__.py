"""Messaging presentation layer.

``contact`` (public form plus the admin inbox) and ``mailbox`` (a
customer's own messages).
"""

from __future__ import annotations

from fastapi import APIRouter

from messaging.presentation.contact.routes import router as contact_router
from messaging.presentation.mailbox.routes import router as mailbox_router

router = APIRouter()

router.include_router(contact_router)
router.include_router(mailbox_router)

__all__ = ["router"]
