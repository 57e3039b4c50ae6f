"""Application services for the reporting bounded context."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from reporting.application.observability import (
    DefaultReportingServiceProbe,
    ReportingServiceProbe,
)
from reporting.domain.value_objects import ProductSummary, StoreCounts
from reporting.ports.repositories import IOrderWorkbookWriter, IReportingRepository
from shared_kernel.money import format_amount

TOP_PRODUCTS_LIMIT = 5


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Dashboard:
    counts: StoreCounts
    total_sales: str
    top_products: list[ProductSummary]


@dataclass(frozen=True)
class OrderExport:
    filename: str
    content: bytes
    order_count: int


class ReportingService:
    """Builds the admin dashboard and the order spreadsheet."""

    def __init__(
        self,
        session: AsyncSession,
        repository: IReportingRepository,
        workbook_writer: IOrderWorkbookWriter,
        probe: ReportingServiceProbe | None = None,
        currency: str = "LKR",
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the service.

        Args:
            session: Database session for transaction management
            repository: Read-only cross-context queries
            workbook_writer: Renders the order export
            probe: Optional domain probe for observability
            currency: Currency prefix for the sales total
            clock: Source of the current time for coupon expiry and filenames
        """
        self._session = session
        self._repository = repository
        self._workbook_writer = workbook_writer
        self._probe = probe or DefaultReportingServiceProbe()
        self._currency = currency
        self._clock = clock

    async def dashboard(self) -> Dashboard:
        async with self._session.begin():
            counts = await self._repository.store_counts(now=self._clock())
            top_products = await self._repository.recent_products(TOP_PRODUCTS_LIMIT)

        self._probe.dashboard_built(
            total_orders=counts.total_orders, total_sales=counts.total_sales
        )
        return Dashboard(
            counts=counts,
            total_sales=format_amount(counts.total_sales, self._currency),
            top_products=top_products,
        )

    async def export_orders(self) -> OrderExport:
        """Render every order into ``orders-<YYYY-MM-DD>.xlsx``."""
        async with self._session.begin():
            rows = await self._repository.orders_for_export()

        content = self._workbook_writer.write(rows)
        self._probe.orders_exported(order_count=len(rows), size_bytes=len(content))
        return OrderExport(
            filename=f"orders-{self._clock().date().isoformat()}.xlsx",
            content=content,
            order_count=len(rows),
        )
