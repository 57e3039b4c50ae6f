"""Dependency injection for the reporting bounded context."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_read_session
from infrastructure.settings import Settings, get_settings
from reporting.application.observability import (
    DefaultReportingServiceProbe,
    ReportingServiceProbe,
)
from reporting.application.services import ReportingService
from reporting.infrastructure.order_workbook import OrderWorkbookWriter
from reporting.infrastructure.reporting_repository import ReportingRepository


def get_reporting_service_probe() -> ReportingServiceProbe:
    """Get ReportingServiceProbe instance.

    Returns:
        DefaultReportingServiceProbe instance for observability
    """
    return DefaultReportingServiceProbe()


def get_reporting_service(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    probe: Annotated[ReportingServiceProbe, Depends(get_reporting_service_probe)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReportingService:
    """Get ReportingService instance.

    Reports only read, so they run on the read session.
    """
    return ReportingService(
        session=session,
        repository=ReportingRepository(session=session),
        workbook_writer=OrderWorkbookWriter(),
        probe=probe,
        currency=settings.currency,
    )
