"""Unit tests for the security perimeter middleware."""

from __future__ import annotations

from unittest.mock import create_autospec

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from shared_kernel.middleware.observability import PerimeterProbe
from shared_kernel.middleware.perimeter import SecurityPerimeterMiddleware
from shared_kernel.security import SECURITY_HEADERS, OriginValidator

APP_URL = "https://shop.example.com"


@pytest.fixture
def mock_probe():
    return create_autospec(PerimeterProbe, instance=True)


@pytest.fixture
def test_client(mock_probe) -> TestClient:
    app = FastAPI()
    app.add_middleware(
        SecurityPerimeterMiddleware,
        validator=OriginValidator(app_url=APP_URL),
        probe=mock_probe,
    )

    @app.get("/api/things")
    def list_things():
        return {"things": []}

    @app.post("/api/things")
    def create_thing():
        return {"success": True}

    @app.get("/api/broken")
    def broken():
        raise RuntimeError("database went away")

    return TestClient(app)


class TestSecurityPerimeterMiddleware:
    """Tests for origin enforcement and response headers."""

    def test_security_headers_on_every_response(self, test_client):
        response = test_client.get("/api/things")

        assert response.status_code == status.HTTP_200_OK
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value

    def test_trusted_origin_reaches_handler(self, test_client, mock_probe):
        response = test_client.post("/api/things", headers={"Origin": APP_URL})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True}
        mock_probe.csrf_request_blocked.assert_not_called()

    def test_foreign_origin_is_blocked(self, test_client, mock_probe):
        """Blocked requests get 403 with the CSRF body and headers."""
        response = test_client.post(
            "/api/things", headers={"Origin": "https://evil.test"}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json() == {
            "error": "CSRF validation failed",
            "message": "This request appears to be from an unauthorized source",
        }
        assert response.headers["X-CSRF-Protection"] == "active"
        assert response.headers["X-Frame-Options"] == "DENY"
        mock_probe.csrf_request_blocked.assert_called_once_with(
            method="POST",
            path="/api/things",
            origin="https://evil.test",
            referer=None,
            has_auth=False,
            reason="Invalid origin",
        )

    def test_bearer_request_without_origin_passes(self, test_client):
        response = test_client.post(
            "/api/things", headers={"Authorization": "Bearer token"}
        )

        assert response.status_code == status.HTTP_200_OK

    def test_anonymous_request_without_origin_is_blocked(self, test_client):
        response = test_client.post("/api/things")

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestUnhandledErrors:
    """Handler failures still leave through the perimeter."""

    def test_failing_handler_returns_500_with_security_headers(self, test_client):
        response = test_client.get("/api/broken")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Internal server error"}
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value

    def test_failing_handler_is_reported(self, test_client, mock_probe):
        test_client.get("/api/broken")

        mock_probe.request_failed.assert_called_once()
        kwargs = mock_probe.request_failed.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/api/broken"
        assert isinstance(kwargs["error"], RuntimeError)

    def test_error_text_is_not_leaked(self, test_client):
        response = test_client.get("/api/broken")

        assert "database went away" not in response.text
