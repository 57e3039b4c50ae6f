"""Unit tests for inventory routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from infrastructure.errors import register_exception_handlers
from inventory.application.services import InventoryService
from inventory.application.value_objects import InventoryListing, InventoryStats
from inventory.domain.aggregates import InventoryItem
from inventory.domain.value_objects import InventoryItemId
from inventory.ports.exceptions import InventoryItemNotFoundError


@pytest.fixture
def mock_inventory_service() -> AsyncMock:
    return AsyncMock(spec=InventoryService)


@pytest.fixture
def current_identity(admin_identity):
    return admin_identity


@pytest.fixture
def test_client(mock_inventory_service, current_identity) -> TestClient:
    from iam.dependencies.user import get_optional_identity
    from inventory.dependencies.inventory import get_inventory_service
    from inventory.presentation import router

    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_inventory_service] = lambda: mock_inventory_service
    app.dependency_overrides[get_optional_identity] = lambda: current_identity
    app.include_router(router)

    return TestClient(app)


@pytest.fixture
def item() -> InventoryItem:
    return InventoryItem.create(name="Boxes", quantity=4, cost_per_unit=25)


class TestListItems:
    def test_returns_items_and_stats(self, test_client, mock_inventory_service, item):
        mock_inventory_service.list_items.return_value = InventoryListing(
            items=[item], stats=InventoryStats.of([item])
        )

        response = test_client.get("/inventory")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["items"][0]["name"] == "Boxes"
        assert body["items"][0]["lowStockAlert"] == 5
        assert body["stats"] == {
            "totalItems": 1,
            "lowStockCount": 1,
            "totalValue": 100,
            "categoriesCount": 1,
        }

    def test_filters_are_forwarded(self, test_client, mock_inventory_service):
        mock_inventory_service.list_items.return_value = InventoryListing(
            items=[], stats=InventoryStats.of([])
        )

        test_client.get(
            "/inventory", params={"category": "Packaging", "lowStock": "true"}
        )

        mock_inventory_service.list_items.assert_awaited_once_with(
            category="Packaging", low_stock_only=True
        )


class TestInventoryAsCustomer:
    @pytest.fixture
    def current_identity(self, customer_identity):
        return customer_identity

    def test_forbidden(self, test_client, mock_inventory_service):
        response = test_client.get("/inventory")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        mock_inventory_service.list_items.assert_not_called()


class TestInventorySignedOut:
    @pytest.fixture
    def current_identity(self):
        return None

    def test_unauthorized(self, test_client):
        response = test_client.post("/inventory", json={"name": "Boxes"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestCreateItem:
    def test_creates(self, test_client, mock_inventory_service, item):
        mock_inventory_service.create_item.return_value = item

        response = test_client.post(
            "/inventory", json={"name": "Boxes", "quantity": 4, "costPerUnit": 25}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] == item.id.value
        kwargs = mock_inventory_service.create_item.await_args.kwargs
        assert kwargs["name"] == "Boxes"
        assert kwargs["cost_per_unit"] == 25
        assert kwargs["unit"] is None

    def test_missing_name(self, test_client, mock_inventory_service):
        mock_inventory_service.create_item.side_effect = ValueError("Name is required")

        response = test_client.post("/inventory", json={"quantity": 4})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Name is required"}

    def test_negative_quantity(self, test_client, mock_inventory_service):
        response = test_client.post(
            "/inventory", json={"name": "Boxes", "quantity": -1}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        mock_inventory_service.create_item.assert_not_called()


class TestUpdateItem:
    def test_only_sent_fields_are_applied(
        self, test_client, mock_inventory_service, item
    ):
        mock_inventory_service.update_item.return_value = item.updated(supplier=None)

        response = test_client.put(
            f"/inventory/{item.id.value}", json={"supplier": None, "lowStockAlert": 2}
        )

        assert response.status_code == status.HTTP_200_OK
        mock_inventory_service.update_item.assert_awaited_once_with(
            item.id, supplier=None, low_stock_alert=2
        )

    def test_missing_item(self, test_client, mock_inventory_service):
        mock_inventory_service.update_item.side_effect = InventoryItemNotFoundError()

        response = test_client.put(
            f"/inventory/{InventoryItemId.generate().value}", json={"quantity": 1}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Not found"}


class TestAdjustQuantity:
    def test_adjusts_by_delta(self, test_client, mock_inventory_service, item):
        mock_inventory_service.adjust_quantity.return_value = item.adjusted(-10)

        response = test_client.patch(f"/inventory/{item.id.value}", json={"delta": -10})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["quantity"] == 0
        mock_inventory_service.adjust_quantity.assert_awaited_once_with(item.id, -10)

    def test_delta_required(self, test_client, mock_inventory_service, item):
        response = test_client.patch(f"/inventory/{item.id.value}", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        mock_inventory_service.adjust_quantity.assert_not_called()

    def test_missing_item(self, test_client, mock_inventory_service):
        mock_inventory_service.adjust_quantity.side_effect = (
            InventoryItemNotFoundError()
        )

        response = test_client.patch(
            f"/inventory/{InventoryItemId.generate().value}", json={"delta": 1}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteItem:
    def test_deletes(self, test_client, mock_inventory_service, item):
        response = test_client.delete(f"/inventory/{item.id.value}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True}
        mock_inventory_service.delete_item.assert_awaited_once_with(item.id)

    def test_malformed_id(self, test_client, mock_inventory_service):
        response = test_client.delete("/inventory/42")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid item ID format"}
        mock_inventory_service.delete_item.assert_not_called()
