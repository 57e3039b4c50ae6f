"""Domain probes for the reporting application layer."""

from __future__ import annotations

from typing import Protocol

import structlog


class ReportingServiceProbe(Protocol):
    """Domain probe for dashboard and export operations."""

    def dashboard_built(self, total_orders: int, total_sales: float) -> None: ...

    def orders_exported(self, order_count: int, size_bytes: int) -> None:
        """Record a finished order export."""
        ...


class DefaultReportingServiceProbe:
    """Default implementation of ReportingServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def dashboard_built(self, total_orders: int, total_sales: float) -> None:
        self._logger.debug(
            "dashboard_built", total_orders=total_orders, total_sales=total_sales
        )

    def orders_exported(self, order_count: int, size_bytes: int) -> None:
        self._logger.info(
            "orders_exported", order_count=order_count, size_bytes=size_bytes
        )
