"""structlog setup for the API process.

Console output with colours when attached to a terminal (or FORCE_COLOR is
set, e.g. under docker compose); one JSON object per line otherwise, which
is what the log shipper expects.
"""

import logging
import os
import sys

import structlog

_TRUTHY = ("1", "true", "yes")


def _wants_colour() -> bool:
    if os.environ.get("FORCE_COLOR", "").lower() in _TRUTHY:
        return True
    return sys.stdout.isatty()


def _renderers(colour: bool) -> list[structlog.types.Processor]:
    if colour:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(debug: bool = False, app_name: str | None = None) -> None:
    """Configure structlog for the whole process.

    Args:
        debug: Emit debug events (probe cache hits, dashboard builds)
        app_name: Bound to every event as ``service`` when given
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        *_renderers(_wants_colour()),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if app_name:
        structlog.contextvars.bind_contextvars(service=app_name)
