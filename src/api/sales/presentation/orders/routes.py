"""Order routes.

Customers place and read their own orders; admins read every order and
move orders through fulfilment.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from iam.application.value_objects import AuthenticatedIdentity
from iam.dependencies.user import AdminIdentity, CurrentIdentity
from sales.application.services import Customer, OrderLine, OrderService
from sales.dependencies.order import get_order_service
from sales.domain.value_objects import CouponRejection, OrderId
from sales.ports.exceptions import (
    CouponRejectedError,
    InvalidOrderItemError,
    OrderNotFoundError,
)
from sales.presentation.orders.models import (
    CreateOrderRequest,
    OrderResponse,
    UpdateOrderStatusRequest,
)
from shared_kernel.api_models import parse_entity_id
from shared_kernel.errors import NotFoundError, UnexpectedError, ValidationError

logger = structlog.get_logger()

router = APIRouter(prefix="/orders", tags=["orders"])

OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]


def _customer(identity: AuthenticatedIdentity) -> Customer:
    return Customer(
        id=identity.user_id.value,
        email=identity.email,
        name=identity.name,
        is_admin=identity.is_admin,
    )


@router.get(
    "",
    response_model=list[OrderResponse],
    summary="List orders",
    description="Admins see every order; customers see their own. Newest first.",
)
async def list_orders(
    identity: CurrentIdentity, service: OrderServiceDep
) -> list[OrderResponse]:
    try:
        orders = await service.list_orders(_customer(identity))
        return [OrderResponse.from_domain(order) for order in orders]
    except Exception as e:
        logger.error("order_list_failed", error=str(e))
        raise UnexpectedError("Failed to fetch orders")


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get an order",
    responses={404: {"description": "Order not found or not visible"}},
)
async def get_order(
    order_id: str, identity: CurrentIdentity, service: OrderServiceDep
) -> OrderResponse:
    order_id_obj = parse_entity_id(OrderId, order_id, "order ID")
    try:
        order = await service.get_order(order_id_obj, _customer(identity))
        return OrderResponse.from_domain(order)
    except OrderNotFoundError:
        raise NotFoundError("Order not found")
    except Exception as e:
        logger.error("order_fetch_failed", order_id=order_id, error=str(e))
        raise UnexpectedError("Failed to fetch order")


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    responses={
        400: {"description": "Unknown product, invalid quantity or coupon"},
        401: {"description": "Authentication required"},
        404: {"description": "Unknown coupon code"},
    },
)
async def create_order(
    request: CreateOrderRequest,
    identity: CurrentIdentity,
    service: OrderServiceDep,
) -> OrderResponse:
    try:
        order = await service.place_order(
            customer=_customer(identity),
            lines=[
                OrderLine(product_id=line.product_id, quantity=line.quantity)
                for line in request.items
            ],
            coupon_code=request.coupon_code,
            shipping_address=request.shipping_address,
            notes=request.notes,
            payment_method=request.payment_method,
        )
        return OrderResponse.from_domain(order)
    except InvalidOrderItemError as e:
        raise ValidationError(str(e))
    except CouponRejectedError as e:
        if e.reason is CouponRejection.NOT_FOUND:
            raise NotFoundError(e.message)
        raise ValidationError(e.message)
    except ValueError as e:
        raise ValidationError(str(e))
    except Exception as e:
        logger.error("order_create_failed", error=str(e))
        raise UnexpectedError("Failed to create order")


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Update an order's status",
    responses={
        403: {"description": "Admin role required"},
        404: {"description": "Order not found"},
    },
)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    admin: AdminIdentity,
    service: OrderServiceDep,
) -> OrderResponse:
    order_id_obj = parse_entity_id(OrderId, order_id, "order ID")
    try:
        order = await service.update_status(order_id_obj, request.status)
        return OrderResponse.from_domain(order)
    except OrderNotFoundError:
        raise NotFoundError("Order not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error("order_update_failed", order_id=order_id, error=str(e))
        raise UnexpectedError("Failed to update order")
