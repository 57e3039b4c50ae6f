"""Repository interfaces (ports) for the reporting bounded context.

Reporting reads across every other context's tables and never writes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from reporting.domain.value_objects import OrderExportRow, ProductSummary, StoreCounts


@runtime_checkable
class IReportingRepository(Protocol):
    """Read-only queries behind the admin dashboard and exports."""

    async def store_counts(self, now: datetime) -> StoreCounts:
        """Count products, categories, customers, orders, coupons and messages.

        Args:
            now: Coupons expiring before this are not counted as active
        """
        ...

    async def recent_products(self, limit: int) -> list[ProductSummary]:
        """Newest products first, any status."""
        ...

    async def orders_for_export(self) -> list[OrderExportRow]:
        """Every order, newest first, with its items and owner profile."""
        ...


class IOrderWorkbookWriter(Protocol):
    """Renders export rows as a spreadsheet file."""

    def write(self, rows: list[OrderExportRow]) -> bytes: ...
