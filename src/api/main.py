"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog.presentation import router as catalog_router
from iam.presentation import router as iam_router
from infrastructure.database.dependencies import close_database_connections
from infrastructure.errors import register_exception_handlers
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import get_security_settings, get_settings
from infrastructure.version import __version__
from inventory.presentation import router as inventory_router
from messaging.presentation import router as messaging_router
from reporting.presentation import router as reporting_router
from sales.presentation import router as sales_router
from shared_kernel.middleware.perimeter import SecurityPerimeterMiddleware
from shared_kernel.security import OriginValidator

API_PREFIX = "/api"


def build_origin_validator() -> OriginValidator:
    """Origin allow-list from the perimeter settings."""
    security = get_security_settings()
    return OriginValidator(
        app_url=security.app_url,
        platform_url=security.platform_url,
        dev_origins=security.dev_origins,
        api_prefix=security.api_prefix,
    )


@asynccontextmanager
async def webmall_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Database engine disposal on shutdown
    """
    settings = get_settings()
    configure_logging(debug=settings.debug, app_name=settings.app_name)

    probe = DefaultStartupProbe()
    probe.application_starting(app_name=settings.app_name, version=__version__)
    probe.perimeter_configured(
        allowed_origin_count=len(build_origin_validator().static_origins)
    )

    yield

    await close_database_connections()
    probe.application_stopped(app_name=settings.app_name)


app = FastAPI(
    title="WebMall API",
    description="Storefront and back-office JSON API",
    version=__version__,
    lifespan=webmall_lifespan,
)

register_exception_handlers(app)

app.add_middleware(SecurityPerimeterMiddleware, validator=build_origin_validator())

# Bounded context routes
app.include_router(iam_router, prefix=API_PREFIX)
app.include_router(catalog_router, prefix=API_PREFIX)
app.include_router(sales_router, prefix=API_PREFIX)
app.include_router(inventory_router, prefix=API_PREFIX)
app.include_router(messaging_router, prefix=API_PREFIX)
app.include_router(reporting_router, prefix=API_PREFIX)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
