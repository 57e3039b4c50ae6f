"""Unit tests for origin-based CSRF validation."""

from __future__ import annotations

import pytest

from shared_kernel.security import Origin, OriginValidator, has_bearer_token

APP_URL = "https://shop.example.com"


@pytest.fixture
def validator() -> OriginValidator:
    return OriginValidator(
        app_url=APP_URL,
        platform_url="https://webmall.pages.example.net",
        dev_origins=["http://localhost:3000"],
    )


def _validate(validator: OriginValidator, **overrides):
    request = {
        "method": "POST",
        "path": "/api/orders",
        "origin": None,
        "referer": None,
        "host": "api.example.com",
        "authorization": None,
    }
    request.update(overrides)
    return validator.validate(**request)


class TestOriginParse:
    """Tests for structural origin parsing."""

    def test_default_port_is_filled_in(self):
        assert Origin.parse("https://shop.example.com") == Origin(
            "https", "shop.example.com", 443
        )

    def test_explicit_default_port_matches_implicit(self):
        assert Origin.parse("https://shop.example.com:443/path") == Origin.parse(
            "https://shop.example.com"
        )

    def test_host_is_case_insensitive(self):
        assert Origin.parse("https://SHOP.example.com") == Origin.parse(APP_URL)

    @pytest.mark.parametrize("url", [None, "", "null", "/relative", "http://h:bad"])
    def test_unparseable_values_return_none(self, url):
        assert Origin.parse(url) is None


class TestOriginValidator:
    """Tests for the allow-list decision."""

    @pytest.mark.parametrize("method", ["GET", "HEAD", "OPTIONS"])
    def test_safe_methods_are_not_checked(self, validator, method):
        """Reads pass even with a foreign origin."""
        decision = _validate(validator, method=method, origin="https://evil.test")
        assert decision.allowed is True

    def test_paths_outside_api_are_not_checked(self, validator):
        decision = _validate(validator, path="/health", origin="https://evil.test")
        assert decision.allowed is True

    def test_configured_origin_is_allowed(self, validator):
        assert _validate(validator, origin=APP_URL).allowed is True

    def test_dev_origin_is_allowed(self, validator):
        assert _validate(validator, origin="http://localhost:3000").allowed is True

    def test_own_host_is_allowed(self, validator):
        """The API's own host is trusted over http and https."""
        decision = _validate(validator, origin="https://api.example.com")
        assert decision.allowed is True

    def test_prefix_lookalike_origin_is_rejected(self, validator):
        """Comparison is structural, not by string prefix."""
        decision = _validate(validator, origin="https://shop.example.com.evil.test")
        assert decision.allowed is False
        assert decision.reason == "Invalid origin"

    def test_foreign_origin_is_rejected_even_with_bearer_token(self, validator):
        decision = _validate(
            validator, origin="https://evil.test", authorization="Bearer abc"
        )
        assert decision.allowed is False

    def test_referer_is_used_when_origin_missing(self, validator):
        decision = _validate(validator, referer=f"{APP_URL}/checkout?step=2")
        assert decision.allowed is True

    def test_foreign_referer_is_rejected(self, validator):
        decision = _validate(validator, referer="https://evil.test/page")
        assert decision.allowed is False
        assert decision.reason == "Invalid referer"

    def test_bearer_token_without_origin_is_allowed(self, validator):
        """Non-browser clients authenticate with a token instead."""
        decision = _validate(validator, authorization="Bearer abc.def.ghi")
        assert decision.allowed is True

    def test_missing_origin_referer_and_token_is_rejected(self, validator):
        decision = _validate(validator)
        assert decision.allowed is False
        assert decision.reason == "Missing origin and referer"

    def test_static_origins_skip_unset_urls(self):
        validator = OriginValidator(app_url=None, platform_url=APP_URL)
        assert validator.static_origins == [APP_URL]


class TestHasBearerToken:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("Bearer abc", True),
            ("bearer abc", True),
            ("Bearer ", False),
            ("Basic abc", False),
            (None, False),
        ],
    )
    def test_detects_bearer_scheme(self, header, expected):
        assert has_bearer_token(header) is expected
