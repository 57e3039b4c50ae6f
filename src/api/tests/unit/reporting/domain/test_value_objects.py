"""Unit tests for reporting read models."""

from datetime import datetime, timezone

from reporting.domain.value_objects import OrderExportRow, StoreCounts


def _row(**fields) -> OrderExportRow:
    defaults = {
        "order_number": "ORD-1700000000000",
        "status": "pending",
        "created_at": datetime(2026, 1, 5, 10, 30, tzinfo=timezone.utc),
        "customer_name": "Nimal Perera",
        "customer_email": "nimal@example.com",
        "total_amount": 1800.0,
        "payment_method": "cod",
        "items": [("Tea", 2), ("Mug", 1)],
    }
    defaults.update(fields)
    return OrderExportRow(**defaults)


class TestOrderExportRow:
    def test_shipping_address_wins(self):
        row = _row(
            shipping_address={
                "name": "Kamala",
                "email": "kamala@example.com",
                "phone": "0771234567",
                "address": "12 Galle Rd",
                "city": "Colombo",
                "postalCode": "00300",
            },
            profile_phone="0110000000",
            profile_address="Somewhere else",
        )

        assert row.contact_name == "Kamala"
        assert row.contact_email == "kamala@example.com"
        assert row.contact_phone == "0771234567"
        assert row.delivery_address == "12 Galle Rd, Colombo, 00300"

    def test_falls_back_to_profile(self):
        row = _row(profile_phone="0110000000", profile_address="5 Hill St, Kandy")

        assert row.contact_name == "Nimal Perera"
        assert row.contact_email == "nimal@example.com"
        assert row.contact_phone == "0110000000"
        assert row.delivery_address == "5 Hill St, Kandy"

    def test_missing_details_are_na(self):
        row = _row(customer_name="", shipping_address={"city": ""})

        assert row.contact_name == "N/A"
        assert row.contact_phone == "N/A"
        assert row.delivery_address == "N/A"

    def test_partial_address_skips_blanks(self):
        row = _row(shipping_address={"address": "12 Galle Rd", "postalCode": "00300"})

        assert row.delivery_address == "12 Galle Rd, 00300"

    def test_items_summary(self):
        assert _row().items_summary == "Tea (x2), Mug (x1)"


class TestStoreCounts:
    def test_derived_totals(self):
        counts = StoreCounts(
            total_products=10,
            active_products=8,
            total_categories=3,
            total_customers=42,
            total_orders=20,
            pending_orders=5,
            completed_orders=12,
            total_coupons=4,
            active_coupons=2,
            total_sales=125000.0,
            messages_new=2,
            messages_read=1,
            messages_replied=6,
        )

        assert counts.active_orders == 8
        assert counts.messages_total == 9
