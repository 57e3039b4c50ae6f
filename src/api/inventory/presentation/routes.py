"""Inventory routes. Every endpoint requires the admin role."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from iam.dependencies.user import AdminIdentity
from inventory.application.services import InventoryService
from inventory.dependencies.inventory import get_inventory_service
from inventory.domain.value_objects import InventoryItemId
from inventory.ports.exceptions import InventoryItemNotFoundError
from inventory.presentation.models import (
    AdjustQuantityRequest,
    CreateInventoryItemRequest,
    InventoryItemResponse,
    InventoryListResponse,
    UpdateInventoryItemRequest,
)
from shared_kernel.api_models import SuccessResponse, parse_entity_id
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(prefix="/inventory", tags=["inventory"])

InventoryServiceDep = Annotated[InventoryService, Depends(get_inventory_service)]


@router.get(
    "",
    response_model=InventoryListResponse,
    summary="List inventory items",
    description=(
        "Items ordered by name, optionally filtered by category or low stock. "
        "Stats always cover the whole inventory."
    ),
)
async def list_items(
    admin: AdminIdentity,
    service: InventoryServiceDep,
    category: str | None = None,
    low_stock: Annotated[bool, Query(alias="lowStock")] = False,
) -> InventoryListResponse:
    try:
        listing = await service.list_items(category=category, low_stock_only=low_stock)
        return InventoryListResponse.from_listing(listing)
    except Exception as e:
        logger.error("inventory_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch inventory")


@router.post(
    "",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an inventory item",
    responses={400: {"description": "Name missing or negative numbers"}},
)
async def create_item(
    request: CreateInventoryItemRequest,
    admin: AdminIdentity,
    service: InventoryServiceDep,
) -> InventoryItemResponse:
    try:
        item = await service.create_item(
            name=request.name,
            category=request.category,
            quantity=request.quantity,
            unit=request.unit,
            low_stock_alert=request.low_stock_alert,
            cost_per_unit=request.cost_per_unit,
            supplier=request.supplier,
            notes=request.notes,
        )
        return InventoryItemResponse.from_domain(item)
    except ValueError as e:
        raise ValidationError(str(e))
    except Exception as e:
        logger.error("inventory_create_failed", error=str(e))
        raise UnexpectedError("Failed to create inventory item")


@router.put(
    "/{item_id}",
    response_model=InventoryItemResponse,
    summary="Update an inventory item",
    responses={404: {"description": "Item not found"}},
)
async def update_item(
    item_id: str,
    request: UpdateInventoryItemRequest,
    admin: AdminIdentity,
    service: InventoryServiceDep,
) -> InventoryItemResponse:
    item_id_obj = parse_entity_id(InventoryItemId, item_id, "item ID")
    try:
        item = await service.update_item(
            item_id_obj, **request.model_dump(exclude_unset=True)
        )
        return InventoryItemResponse.from_domain(item)
    except InventoryItemNotFoundError:
        raise NotFoundError("Not found")
    except ValueError as e:
        raise ValidationError(str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error("inventory_update_failed", item_id=item_id, error=str(e))
        raise UnexpectedError("Failed to update inventory item")


@router.patch(
    "/{item_id}",
    response_model=InventoryItemResponse,
    summary="Adjust an item's quantity",
    description="Adds delta to the quantity; the result never drops below zero.",
    responses={404: {"description": "Item not found"}},
)
async def adjust_quantity(
    item_id: str,
    request: AdjustQuantityRequest,
    admin: AdminIdentity,
    service: InventoryServiceDep,
) -> InventoryItemResponse:
    item_id_obj = parse_entity_id(InventoryItemId, item_id, "item ID")
    try:
        item = await service.adjust_quantity(item_id_obj, request.delta)
        return InventoryItemResponse.from_domain(item)
    except InventoryItemNotFoundError:
        raise NotFoundError("Not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error("inventory_adjust_failed", item_id=item_id, error=str(e))
        raise UnexpectedError("Failed to adjust inventory item")


@router.delete(
    "/{item_id}",
    response_model=SuccessResponse,
    summary="Delete an inventory item",
    responses={404: {"description": "Item not found"}},
)
async def delete_item(
    item_id: str,
    admin: AdminIdentity,
    service: InventoryServiceDep,
) -> SuccessResponse:
    item_id_obj = parse_entity_id(InventoryItemId, item_id, "item ID")
    try:
        await service.delete_item(item_id_obj)
        return SuccessResponse()
    except InventoryItemNotFoundError:
        raise NotFoundError("Not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error("inventory_delete_failed", item_id=item_id, error=str(e))
        raise UnexpectedError("Failed to delete inventory item")
