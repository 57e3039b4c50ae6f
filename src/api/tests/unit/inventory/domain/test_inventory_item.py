"""Unit tests for the InventoryItem aggregate."""

import pytest

from inventory.application.value_objects import InventoryStats
from inventory.domain.aggregates import InventoryItem


class TestCreate:
    def test_defaults(self):
        item = InventoryItem.create(name="  Packing tape ")

        assert item.name == "Packing tape"
        assert item.category == "General"
        assert item.quantity == 0
        assert item.unit == "pcs"
        assert item.low_stock_alert == 5
        assert item.cost_per_unit is None

    def test_blank_supplier_becomes_none(self):
        item = InventoryItem.create(name="Boxes", supplier="   ", notes=" fragile ")

        assert item.supplier is None
        assert item.notes == "fragile"

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError, match="Name is required"):
            InventoryItem.create(name="   ")

    @pytest.mark.parametrize(
        "field,message",
        [
            ("quantity", "Quantity cannot be negative"),
            ("low_stock_alert", "Low stock alert cannot be negative"),
            ("cost_per_unit", "Cost per unit cannot be negative"),
        ],
    )
    def test_negative_numbers_rejected(self, field, message):
        with pytest.raises(ValueError, match=message):
            InventoryItem.create(name="Boxes", **{field: -1})


class TestUpdated:
    def test_only_given_fields_change(self):
        item = InventoryItem.create(name="Boxes", quantity=10, supplier="Acme")

        updated = item.updated(quantity=3)

        assert updated.quantity == 3
        assert updated.supplier == "Acme"
        assert updated.id == item.id

    def test_explicit_none_clears_optional_text(self):
        item = InventoryItem.create(name="Boxes", cost_per_unit=12.5, supplier="Acme")

        updated = item.updated(supplier=None, cost_per_unit=None)

        assert updated.supplier is None
        assert updated.cost_per_unit is None

    def test_none_does_not_clear_name(self):
        item = InventoryItem.create(name="Boxes")

        assert item.updated(name=None).name == "Boxes"

    def test_update_is_revalidated(self):
        item = InventoryItem.create(name="Boxes")

        with pytest.raises(ValueError, match="Quantity cannot be negative"):
            item.updated(quantity=-4)


class TestAdjusted:
    def test_restock(self):
        item = InventoryItem.create(name="Boxes", quantity=2)

        assert item.adjusted(8).quantity == 10

    def test_consumption_clamps_at_zero(self):
        item = InventoryItem.create(name="Boxes", quantity=2)

        assert item.adjusted(-5).quantity == 0


class TestStockLevels:
    def test_low_stock_is_inclusive(self):
        assert InventoryItem.create(name="A", quantity=5).is_low_stock
        assert not InventoryItem.create(name="A", quantity=6).is_low_stock

    def test_stock_value(self):
        item = InventoryItem.create(name="A", quantity=3, cost_per_unit=19.99)

        assert item.stock_value == 59.97

    def test_stats_cover_every_item(self):
        items = [
            InventoryItem.create(name="A", quantity=1, cost_per_unit=100),
            InventoryItem.create(name="B", quantity=20, cost_per_unit=2.5),
            InventoryItem.create(name="C", quantity=50, category="Packaging"),
        ]

        stats = InventoryStats.of(items)

        assert stats.total_items == 3
        assert stats.low_stock_count == 1
        assert stats.total_value == 150
        assert stats.categories_count == 2
