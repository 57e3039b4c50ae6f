"""Unit tests for the shared API model helpers."""

from __future__ import annotations

import pytest

from shared_kernel.api_models import APIModel, parse_entity_id
from shared_kernel.errors import ValidationError
from shared_kernel.identifiers import EntityId


class _Example(APIModel):
    order_total: float
    coupon_code: str | None = None


class TestAPIModel:
    """Tests for camelCase aliasing."""

    def test_accepts_camel_case_and_snake_case(self):
        assert _Example.model_validate({"orderTotal": 10}).order_total == 10
        assert _Example.model_validate({"order_total": 10}).order_total == 10

    def test_dumps_camel_case_by_alias(self):
        dumped = _Example(order_total=5, coupon_code="SAVE10").model_dump(by_alias=True)
        assert dumped == {"orderTotal": 5, "couponCode": "SAVE10"}


class TestParseEntityId:
    """Tests for path id parsing."""

    def test_parses_valid_ulid(self):
        generated = EntityId.generate()
        assert parse_entity_id(EntityId, generated.value) == generated

    def test_malformed_id_raises_400_with_label(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_entity_id(EntityId, "not-an-id", "order ID")

        assert exc_info.value.status_code == 400
        assert exc_info.value.error == "Invalid order ID format"
