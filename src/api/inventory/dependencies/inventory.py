"""Inventory dependency providers."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from inventory.application.observability import (
    DefaultInventoryServiceProbe,
    InventoryServiceProbe,
)
from inventory.application.services import InventoryService
from inventory.infrastructure.inventory_repository import InventoryRepository


def get_inventory_service_probe() -> InventoryServiceProbe:
    return DefaultInventoryServiceProbe()


def get_inventory_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> InventoryRepository:
    return InventoryRepository(session=session)


def get_inventory_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    repo: Annotated[InventoryRepository, Depends(get_inventory_repository)],
    probe: Annotated[InventoryServiceProbe, Depends(get_inventory_service_probe)],
) -> InventoryService:
    return InventoryService(session=session, inventory_repository=repo, probe=probe)
