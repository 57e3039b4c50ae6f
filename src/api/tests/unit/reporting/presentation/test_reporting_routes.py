"""Unit tests for admin reporting routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from infrastructure.errors import register_exception_handlers
from reporting.application.services import Dashboard, OrderExport, ReportingService
from reporting.domain.value_objects import ProductSummary, StoreCounts
from reporting.infrastructure.order_workbook import XLSX_MEDIA_TYPE


@pytest.fixture
def mock_reporting_service() -> AsyncMock:
    return AsyncMock(spec=ReportingService)


@pytest.fixture
def current_identity(admin_identity):
    return admin_identity


@pytest.fixture
def test_client(mock_reporting_service, current_identity) -> TestClient:
    from iam.dependencies.user import get_optional_identity
    from reporting.dependencies import get_reporting_service
    from reporting.presentation import router

    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_reporting_service] = lambda: mock_reporting_service
    app.dependency_overrides[get_optional_identity] = lambda: current_identity
    app.include_router(router)

    return TestClient(app)


@pytest.fixture
def dashboard() -> Dashboard:
    return Dashboard(
        counts=StoreCounts(
            total_products=10,
            active_products=8,
            total_categories=3,
            total_customers=42,
            total_orders=20,
            pending_orders=5,
            completed_orders=12,
            total_coupons=4,
            active_coupons=2,
            total_sales=123456.0,
            messages_new=1,
            messages_read=2,
            messages_replied=3,
        ),
        total_sales="LKR 123,456",
        top_products=[
            ProductSummary(
                id="p1", name="Tea", price=500, stock=3, images=[{"url": "/t.png"}]
            )
        ],
    )


class TestAnalytics:
    def test_returns_stats(self, test_client, mock_reporting_service, dashboard):
        mock_reporting_service.dashboard.return_value = dashboard

        response = test_client.get("/admin/analytics")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["stats"] == {
            "totalProducts": 10,
            "activeProducts": 8,
            "totalCategories": 3,
            "totalUsers": 42,
            "totalSales": "LKR 123,456",
            "totalOrders": 20,
            "activeOrders": 8,
            "pendingOrders": 5,
            "completedOrders": 12,
            "totalCoupons": 4,
            "activeCoupons": 2,
            "messageStats": {"new": 1, "read": 2, "replied": 3, "total": 6},
        }
        assert body["topProducts"] == [
            {
                "id": "p1",
                "name": "Tea",
                "price": 500,
                "stock": 3,
                "images": [{"url": "/t.png"}],
            }
        ]

    def test_failure_is_500(self, test_client, mock_reporting_service):
        mock_reporting_service.dashboard.side_effect = RuntimeError("db down")

        response = test_client.get("/admin/analytics")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to fetch analytics"}


class TestExportOrders:
    def test_downloads_workbook(self, test_client, mock_reporting_service):
        mock_reporting_service.export_orders.return_value = OrderExport(
            filename="orders-2026-02-28.xlsx", content=b"PK\x03\x04", order_count=1
        )

        response = test_client.get("/admin/export/orders")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"] == XLSX_MEDIA_TYPE
        assert (
            response.headers["content-disposition"]
            == "attachment; filename=orders-2026-02-28.xlsx"
        )
        assert response.content == b"PK\x03\x04"

    def test_failure_is_500(self, test_client, mock_reporting_service):
        mock_reporting_service.export_orders.side_effect = RuntimeError("db down")

        response = test_client.get("/admin/export/orders")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to generate report"}


class TestReportingAsCustomer:
    @pytest.fixture
    def current_identity(self, customer_identity):
        return customer_identity

    @pytest.mark.parametrize("path", ["/admin/analytics", "/admin/export/orders"])
    def test_forbidden(self, test_client, mock_reporting_service, path):
        response = test_client.get(path)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        mock_reporting_service.dashboard.assert_not_called()
        mock_reporting_service.export_orders.assert_not_called()
