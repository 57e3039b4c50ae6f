"""Unit tests for the xlsx order export writer."""

from datetime import datetime, timezone
from io import BytesIO

import pytest
from openpyxl import load_workbook

from reporting.domain.value_objects import OrderExportRow
from reporting.infrastructure.order_workbook import COLUMNS, OrderWorkbookWriter


@pytest.fixture
def row() -> OrderExportRow:
    return OrderExportRow(
        order_number="ORD-1700000000000",
        status="shipped",
        created_at=datetime(2026, 1, 5, 10, 30, 15, tzinfo=timezone.utc),
        customer_name="Nimal Perera",
        customer_email="nimal@example.com",
        total_amount=1800.0,
        payment_method="cod",
        items=[("Tea", 2)],
        shipping_address={"phone": "0771234567", "city": "Colombo"},
        notes="Call first",
    )


def _sheet(content: bytes):
    workbook = load_workbook(BytesIO(content))
    return workbook["Orders"]


class TestOrderWorkbookWriter:
    def test_header_row(self):
        sheet = _sheet(OrderWorkbookWriter().write([]))

        headers = [cell.value for cell in sheet[1]]
        assert headers == [header for header, _ in COLUMNS]
        assert all(cell.font.bold for cell in sheet[1])
        assert sheet.max_row == 1

    def test_order_row(self, row):
        sheet = _sheet(OrderWorkbookWriter().write([row]))

        values = [cell.value for cell in sheet[2]]
        assert values == [
            "ORD-1700000000000",
            "shipped",
            "2026-01-05 10:30:15",
            "Nimal Perera",
            "nimal@example.com",
            "0771234567",
            "Colombo",
            1800,
            "cod",
            "Tea (x2)",
            "Call first",
        ]

    def test_column_widths(self):
        sheet = _sheet(OrderWorkbookWriter().write([]))

        assert sheet.column_dimensions["A"].width == 15
        assert sheet.column_dimensions["J"].width == 50

    def test_one_row_per_order(self, row):
        sheet = _sheet(OrderWorkbookWriter().write([row, row, row]))

        assert sheet.max_row == 4
