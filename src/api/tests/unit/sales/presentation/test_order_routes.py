"""Unit tests for order routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from infrastructure.errors import register_exception_handlers
from sales.application.services import Customer, OrderLine, OrderService
from sales.domain.aggregates import CouponRejectedError, Order, OrderItem
from sales.domain.value_objects import CouponRejection, OrderId, OrderStatus
from sales.ports.exceptions import InvalidOrderItemError, OrderNotFoundError


@pytest.fixture
def mock_order_service() -> AsyncMock:
    return AsyncMock(spec=OrderService)


@pytest.fixture
def current_identity(customer_identity):
    return customer_identity


@pytest.fixture
def test_client(mock_order_service, current_identity) -> TestClient:
    from iam.dependencies.user import get_optional_identity
    from sales.dependencies.order import get_order_service
    from sales.presentation import router

    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_order_service] = lambda: mock_order_service
    app.dependency_overrides[get_optional_identity] = lambda: current_identity
    app.include_router(router)

    return TestClient(app)


@pytest.fixture
def order(customer_identity) -> Order:
    return Order.place(
        customer_id=customer_identity.user_id.value,
        customer_email=customer_identity.email,
        customer_name=customer_identity.name,
        items=[
            OrderItem(
                product_id="prod-1", product_name="Tea", quantity=2, unit_price=500
            )
        ],
        discount_amount=100,
        coupon_code="SAVE10",
    )


class TestPlaceOrder:
    def test_places_order_for_caller(
        self, test_client, mock_order_service, order, customer_identity
    ):
        mock_order_service.place_order.return_value = order

        response = test_client.post(
            "/orders",
            json={
                "items": [{"productId": "prod-1", "quantity": 2}],
                "couponCode": "save10",
                "notes": "Leave at the door",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["orderNumber"].startswith("ORD-")
        assert body["subtotal"] == 1000
        assert body["discountAmount"] == 100
        assert body["totalAmount"] == 900
        assert body["status"] == "pending"
        assert body["items"][0]["lineTotal"] == 1000

        kwargs = mock_order_service.place_order.await_args.kwargs
        assert kwargs["customer"] == Customer(
            id=customer_identity.user_id.value,
            email="customer@example.com",
            name="Customer",
            is_admin=False,
        )
        assert kwargs["lines"] == [OrderLine(product_id="prod-1", quantity=2)]
        assert kwargs["coupon_code"] == "save10"
        assert kwargs["notes"] == "Leave at the door"

    def test_client_prices_are_ignored(self, test_client, mock_order_service, order):
        mock_order_service.place_order.return_value = order

        test_client.post(
            "/orders",
            json={"items": [{"productId": "prod-1", "quantity": 2, "price": 1}]},
        )

        kwargs = mock_order_service.place_order.await_args.kwargs
        assert kwargs["lines"] == [OrderLine(product_id="prod-1", quantity=2)]

    def test_empty_items_rejected(self, test_client, mock_order_service):
        response = test_client.post("/orders", json={"items": []})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Invalid request"
        mock_order_service.place_order.assert_not_called()

    def test_zero_quantity_rejected(self, test_client, mock_order_service):
        response = test_client.post(
            "/orders", json={"items": [{"productId": "prod-1", "quantity": 0}]}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        mock_order_service.place_order.assert_not_called()

    def test_unknown_product(self, test_client, mock_order_service):
        mock_order_service.place_order.side_effect = InvalidOrderItemError(
            "Invalid product"
        )

        response = test_client.post(
            "/orders", json={"items": [{"productId": "ghost", "quantity": 1}]}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid product"}

    def test_unknown_coupon_is_404(self, test_client, mock_order_service):
        mock_order_service.place_order.side_effect = CouponRejectedError(
            CouponRejection.NOT_FOUND, "Invalid coupon code"
        )

        response = test_client.post(
            "/orders",
            json={"items": [{"productId": "prod-1"}], "couponCode": "NOPE"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Invalid coupon code"}

    def test_exhausted_coupon_is_400(self, test_client, mock_order_service):
        mock_order_service.place_order.side_effect = CouponRejectedError(
            CouponRejection.USAGE_LIMIT_REACHED,
            "This coupon has reached its usage limit",
        )

        response = test_client.post(
            "/orders",
            json={"items": [{"productId": "prod-1"}], "couponCode": "SAVE10"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": "This coupon has reached its usage limit"
        }


class TestOrdersSignedOut:
    @pytest.fixture
    def current_identity(self):
        return None

    def test_place_requires_login(self, test_client, mock_order_service):
        response = test_client.post(
            "/orders", json={"items": [{"productId": "prod-1"}]}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"
        mock_order_service.place_order.assert_not_called()

    def test_list_requires_login(self, test_client):
        response = test_client.get("/orders")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestReadOrders:
    def test_list_scoped_to_caller(
        self, test_client, mock_order_service, order, customer_identity
    ):
        mock_order_service.list_orders.return_value = [order]

        response = test_client.get("/orders")

        assert response.status_code == status.HTTP_200_OK
        assert [o["id"] for o in response.json()] == [order.id.value]
        customer = mock_order_service.list_orders.await_args.args[0]
        assert customer.id == customer_identity.user_id.value
        assert customer.is_admin is False

    def test_get_order(self, test_client, mock_order_service, order):
        mock_order_service.get_order.return_value = order

        response = test_client.get(f"/orders/{order.id.value}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["couponCode"] == "SAVE10"

    def test_someone_elses_order_is_404(self, test_client, mock_order_service):
        mock_order_service.get_order.side_effect = OrderNotFoundError()

        response = test_client.get(f"/orders/{OrderId.generate().value}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Order not found"}

    def test_malformed_id(self, test_client, mock_order_service):
        response = test_client.get("/orders/not-an-id")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid order ID format"}
        mock_order_service.get_order.assert_not_called()


class TestUpdateOrderStatus:
    def test_customer_is_forbidden(self, test_client, mock_order_service, order):
        response = test_client.put(
            f"/orders/{order.id.value}", json={"status": "shipped"}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        mock_order_service.update_status.assert_not_called()


class TestUpdateOrderStatusAsAdmin:
    @pytest.fixture
    def current_identity(self, admin_identity):
        return admin_identity

    def test_updates_status(self, test_client, mock_order_service, order):
        mock_order_service.update_status.return_value = order.with_status(
            OrderStatus.SHIPPED
        )

        response = test_client.put(
            f"/orders/{order.id.value}", json={"status": "shipped"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "shipped"
        mock_order_service.update_status.assert_awaited_once_with(
            order.id, OrderStatus.SHIPPED
        )

    def test_unknown_status_rejected(self, test_client, mock_order_service, order):
        response = test_client.put(
            f"/orders/{order.id.value}", json={"status": "teleported"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        mock_order_service.update_status.assert_not_called()

    def test_missing_order(self, test_client, mock_order_service):
        mock_order_service.update_status.side_effect = OrderNotFoundError()

        response = test_client.put(
            f"/orders/{OrderId.generate().value}", json={"status": "cancelled"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Order not found"}
