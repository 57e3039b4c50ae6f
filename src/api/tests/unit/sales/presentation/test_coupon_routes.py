"""Unit tests for coupon routes."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from infrastructure.errors import register_exception_handlers
from sales.application.services import CouponService
from sales.domain.aggregates import Coupon, CouponQuote, CouponRejectedError
from sales.domain.value_objects import CouponId, CouponRejection, DiscountType
from sales.ports.exceptions import CouponNotFoundError, DuplicateCouponCodeError

EXPIRY = datetime(2026, 12, 31, tzinfo=timezone.utc)


@pytest.fixture
def mock_coupon_service() -> AsyncMock:
    return AsyncMock(spec=CouponService)


@pytest.fixture
def current_identity(customer_identity):
    return customer_identity


@pytest.fixture
def test_client(mock_coupon_service, current_identity) -> TestClient:
    from iam.dependencies.user import get_optional_identity
    from sales.dependencies.coupon import get_coupon_service
    from sales.presentation import router

    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_coupon_service] = lambda: mock_coupon_service
    app.dependency_overrides[get_optional_identity] = lambda: current_identity
    app.include_router(router)

    return TestClient(app)


@pytest.fixture
def coupon() -> Coupon:
    return Coupon.create(
        code="SAVE10",
        discount_type=DiscountType.PERCENTAGE,
        discount_value=10,
        expiry_date=EXPIRY,
    )


class TestValidateCoupon:
    def test_returns_discount_and_final_total(
        self, test_client, mock_coupon_service, coupon
    ):
        mock_coupon_service.validate_coupon.return_value = CouponQuote(
            coupon=coupon, order_total=2000, discount_amount=200
        )

        response = test_client.post(
            "/coupons/validate", json={"code": "save10", "orderTotal": 2000}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["valid"] is True
        assert body["coupon"]["code"] == "SAVE10"
        assert body["coupon"]["discountType"] == "percentage"
        assert body["discountAmount"] == 200
        assert body["finalTotal"] == 1800
        mock_coupon_service.validate_coupon.assert_awaited_once_with(
            code="save10", order_total=2000, customer_email="customer@example.com"
        )

    def test_missing_code(self, test_client, mock_coupon_service):
        response = test_client.post("/coupons/validate", json={"orderTotal": 2000})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Coupon code is required"}
        mock_coupon_service.validate_coupon.assert_not_called()

    @pytest.mark.parametrize("order_total", [None, 0, -5])
    def test_invalid_order_total(self, test_client, order_total):
        response = test_client.post(
            "/coupons/validate", json={"code": "SAVE10", "orderTotal": order_total}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid order total"}

    def test_unknown_code_is_404(self, test_client, mock_coupon_service):
        mock_coupon_service.validate_coupon.side_effect = CouponRejectedError(
            CouponRejection.NOT_FOUND, "Invalid coupon code"
        )

        response = test_client.post(
            "/coupons/validate", json={"code": "NOPE", "orderTotal": 2000}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Invalid coupon code"}

    def test_other_rejections_are_400(self, test_client, mock_coupon_service):
        mock_coupon_service.validate_coupon.side_effect = CouponRejectedError(
            CouponRejection.EXPIRED, "This coupon has expired"
        )

        response = test_client.post(
            "/coupons/validate", json={"code": "OLD", "orderTotal": 2000}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "This coupon has expired"}

    def test_unexpected_failure_is_500(self, test_client, mock_coupon_service):
        mock_coupon_service.validate_coupon.side_effect = RuntimeError("db down")

        response = test_client.post(
            "/coupons/validate", json={"code": "SAVE10", "orderTotal": 2000}
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to validate coupon"}


class TestValidateCouponSignedOut:
    @pytest.fixture
    def current_identity(self):
        return None

    def test_requires_login(self, test_client, mock_coupon_service):
        response = test_client.post(
            "/coupons/validate", json={"code": "SAVE10", "orderTotal": 2000}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "You must be logged in to use coupons"}
        mock_coupon_service.validate_coupon.assert_not_called()


class TestAdminCouponsAsCustomer:
    def test_list_is_forbidden(self, test_client, mock_coupon_service):
        response = test_client.get("/admin/coupons")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json() == {"error": "Forbidden"}
        mock_coupon_service.list_coupons.assert_not_called()


class TestAdminCoupons:
    @pytest.fixture
    def current_identity(self, admin_identity):
        return admin_identity

    def test_list(self, test_client, mock_coupon_service, coupon):
        mock_coupon_service.list_coupons.return_value = [coupon]

        response = test_client.get("/admin/coupons")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert len(body) == 1
        assert body[0]["code"] == "SAVE10"
        assert body[0]["usageLimit"] == 100
        assert body[0]["timesUsed"] == 0
        assert body[0]["usageType"] == "multi_use"

    def test_create(self, test_client, mock_coupon_service, coupon):
        mock_coupon_service.create_coupon.return_value = coupon

        response = test_client.post(
            "/admin/coupons",
            json={
                "code": "save10",
                "discountType": "percentage",
                "discountValue": 10,
                "expiryDate": EXPIRY.isoformat(),
                "minimumOrder": 1000,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] == coupon.id.value
        kwargs = mock_coupon_service.create_coupon.await_args.kwargs
        assert kwargs["code"] == "save10"
        assert kwargs["discount_type"] is DiscountType.PERCENTAGE
        assert kwargs["minimum_order"] == 1000
        assert kwargs["usage_limit"] is None

    def test_create_duplicate_code(self, test_client, mock_coupon_service):
        mock_coupon_service.create_coupon.side_effect = DuplicateCouponCodeError(
            "Coupon code already exists"
        )

        response = test_client.post(
            "/admin/coupons",
            json={
                "code": "SAVE10",
                "discountType": "fixed",
                "discountValue": 500,
                "expiryDate": EXPIRY.isoformat(),
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Coupon code already exists"}

    def test_create_rejects_bad_discount_type(self, test_client, mock_coupon_service):
        response = test_client.post(
            "/admin/coupons",
            json={
                "code": "SAVE10",
                "discountType": "bogus",
                "discountValue": 10,
                "expiryDate": EXPIRY.isoformat(),
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Invalid request"
        mock_coupon_service.create_coupon.assert_not_called()

    def test_update_passes_only_sent_fields(
        self, test_client, mock_coupon_service, coupon
    ):
        mock_coupon_service.update_coupon.return_value = coupon.updated(
            usage_limit=5
        )

        response = test_client.put(
            f"/admin/coupons/{coupon.id.value}", json={"usageLimit": 5}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["usageLimit"] == 5
        mock_coupon_service.update_coupon.assert_awaited_once_with(
            coupon.id, usage_limit=5
        )

    def test_update_missing_coupon(self, test_client, mock_coupon_service):
        mock_coupon_service.update_coupon.side_effect = CouponNotFoundError()

        response = test_client.put(
            f"/admin/coupons/{CouponId.generate().value}", json={"status": "inactive"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Coupon not found"}

    def test_update_rejects_malformed_id(self, test_client, mock_coupon_service):
        response = test_client.put("/admin/coupons/not-an-id", json={"usageLimit": 5})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Invalid coupon ID format"}
        mock_coupon_service.update_coupon.assert_not_called()

    def test_delete(self, test_client, mock_coupon_service, coupon):
        response = test_client.delete(f"/admin/coupons/{coupon.id.value}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True}
        mock_coupon_service.delete_coupon.assert_awaited_once_with(coupon.id)

    def test_delete_missing_coupon(self, test_client, mock_coupon_service):
        mock_coupon_service.delete_coupon.side_effect = CouponNotFoundError()

        response = test_client.delete(f"/admin/coupons/{CouponId.generate().value}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

