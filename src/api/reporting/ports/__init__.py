"""Ports for the reporting bounded context."""

from reporting.ports.repositories import IOrderWorkbookWriter, IReportingRepository

__all__ = ["IReportingRepository", "IOrderWorkbookWriter"]
