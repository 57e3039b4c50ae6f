"""Unit tests for ReportingService."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest
import structlog

from reporting.application.observability import (
    DefaultReportingServiceProbe,
    ReportingServiceProbe,
)
from reporting.application.services import ReportingService
from reporting.domain.value_objects import OrderExportRow, ProductSummary, StoreCounts
from reporting.ports.repositories import IOrderWorkbookWriter, IReportingRepository

NOW = datetime(2026, 2, 28, 23, 15, tzinfo=timezone.utc)


@pytest.fixture
def mock_repository():
    return create_autospec(IReportingRepository, instance=True)


@pytest.fixture
def mock_writer():
    writer = create_autospec(IOrderWorkbookWriter, instance=True)
    writer.write.return_value = b"xlsx-bytes"
    return writer


@pytest.fixture
def mock_probe():
    return create_autospec(ReportingServiceProbe, instance=True)


@pytest.fixture
def service(mock_session, mock_repository, mock_writer, mock_probe):
    return ReportingService(
        session=mock_session,
        repository=mock_repository,
        workbook_writer=mock_writer,
        probe=mock_probe,
        currency="LKR",
        clock=lambda: NOW,
    )


@pytest.fixture
def counts() -> StoreCounts:
    return StoreCounts(
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
    )


class TestDashboard:
    @pytest.mark.asyncio
    async def test_builds_dashboard(self, service, mock_repository, mock_probe, counts):
        products = [ProductSummary(id="p1", name="Tea", price=500, stock=3)]
        mock_repository.store_counts = AsyncMock(return_value=counts)
        mock_repository.recent_products = AsyncMock(return_value=products)

        dashboard = await service.dashboard()

        assert dashboard.counts is counts
        assert dashboard.total_sales == "LKR 123,456"
        assert dashboard.top_products == products
        mock_repository.store_counts.assert_awaited_once_with(now=NOW)
        mock_repository.recent_products.assert_awaited_once_with(5)
        mock_probe.dashboard_built.assert_called_once_with(
            total_orders=20, total_sales=123456.0
        )


class TestExportOrders:
    @pytest.mark.asyncio
    async def test_export(self, service, mock_repository, mock_writer, mock_probe):
        rows = [
            OrderExportRow(
                order_number="ORD-1",
                status="pending",
                created_at=NOW,
                customer_name="Nimal",
                customer_email="nimal@example.com",
                total_amount=100,
                payment_method="cod",
                items=[("Tea", 1)],
            )
        ]
        mock_repository.orders_for_export = AsyncMock(return_value=rows)

        export = await service.export_orders()

        assert export.filename == "orders-2026-02-28.xlsx"
        assert export.content == b"xlsx-bytes"
        assert export.order_count == 1
        mock_writer.write.assert_called_once_with(rows)
        mock_probe.orders_exported.assert_called_once_with(
            order_count=1, size_bytes=len(b"xlsx-bytes")
        )

    @pytest.mark.asyncio
    async def test_empty_export_still_writes_workbook(
        self, service, mock_repository, mock_writer
    ):
        mock_repository.orders_for_export = AsyncMock(return_value=[])

        export = await service.export_orders()

        assert export.order_count == 0
        mock_writer.write.assert_called_once_with([])


class TestDefaultProbe:
    def test_orders_exported(self):
        logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultReportingServiceProbe(logger=logger)

        probe.orders_exported(order_count=3, size_bytes=2048)

        logger.info.assert_called_once_with(
            "orders_exported", order_count=3, size_bytes=2048
        )
