"""Application factory for the dashboard API server."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.routing import Route

from glof.lib.config import get_settings
from glof.logging import configure, get_logger
from glof.readings import get_reading_source

from .api.alerts import create_alert, get_alerts
from .api.health import health_check
from .api.readings import get_readings, receive_reading
from .api.risk import get_risk

_logger = get_logger("server.entrypoint")


@asynccontextmanager
async def lifespan(app: Starlette) -> AsyncIterator[None]:
    """Resolve the reading source on startup so misconfiguration fails early."""
    source = get_reading_source()
    _logger.info("Serving readings from %s", type(source).__name__)
    yield
    _logger.info("Dashboard API stopped")


def create_app() -> Starlette:
    """Create and configure the Starlette application.

    Returns:
        Configured Starlette application instance.
    """
    configure(get_settings().log_level)

    routes = [
        Route("/health", health_check),
        Route("/api/risk", get_risk),
        Route("/api/readings", get_readings, methods=["GET"]),
        Route("/api/readings", receive_reading, methods=["POST"]),
        Route("/api/alerts", get_alerts, methods=["GET"]),
        Route("/api/alerts", create_alert, methods=["POST"]),
    ]

    return Starlette(routes=routes, lifespan=lifespan)
