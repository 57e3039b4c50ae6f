"""Admin reporting routes: dashboard analytics and order export."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Response

from iam.dependencies.user import AdminIdentity
from reporting.application.services import ReportingService
from reporting.dependencies import get_reporting_service
from reporting.infrastructure.order_workbook import XLSX_MEDIA_TYPE
from reporting.presentation.models import AnalyticsResponse
from shared_kernel.errors import UnexpectedError

logger = structlog.get_logger()

router = APIRouter(prefix="/admin", tags=["reporting"])

ReportingServiceDep = Annotated[ReportingService, Depends(get_reporting_service)]


@router.get(
    "/analytics",
    response_model=AnalyticsResponse,
    summary="Dashboard analytics",
    description="Store-wide counts, total sales and the five newest products.",
)
async def get_analytics(
    admin: AdminIdentity, service: ReportingServiceDep
) -> AnalyticsResponse:
    try:
        return AnalyticsResponse.from_dashboard(await service.dashboard())
    except Exception as e:
        logger.error("analytics_failed", error=str(e))
        raise UnexpectedError("Failed to fetch analytics")


@router.get(
    "/export/orders",
    summary="Export orders as a spreadsheet",
    response_class=Response,
    responses={200: {"content": {XLSX_MEDIA_TYPE: {}}}},
)
async def export_orders(admin: AdminIdentity, service: ReportingServiceDep) -> Response:
    try:
        export = await service.export_orders()
    except Exception as e:
        logger.error("order_export_failed", error=str(e))
        raise UnexpectedError("Failed to generate report")

    return Response(
        content=export.content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={export.filename}"},
    )
