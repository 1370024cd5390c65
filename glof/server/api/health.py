"""Health check endpoint for monitoring service status."""

from starlette.requests import Request
from starlette.responses import JSONResponse

from glof.lib.exceptions import ReadingSourceError
from glof.lib.utils import from_epoch_ms, now_ms, utcnow
from glof.logging import get_logger
from glof.readings import get_reading_source

logger = get_logger("server.api.health")


async def _check_source() -> tuple[bool, str, int | None]:
    """Check the reading source responds, and how old its newest reading is.

    Returns:
        (ok, status, age of the newest reading in seconds or None)
    """
    try:
        latest = await get_reading_source().fetch_recent(1)
    except ReadingSourceError as e:
        logger.error("Reading source health check failed: %s", e)
        return False, str(e), None
    if not latest:
        return True, "no data", None
    age_sec = max(0, (now_ms() - latest[-1].timestamp) // 1000)
    return True, from_epoch_ms(latest[-1].timestamp).isoformat(), age_sec


async def health_check(request: Request) -> JSONResponse:
    """Return health status of the application and its reading source."""
    ok, status, age_sec = await _check_source()

    return JSONResponse(
        {
            "status": "healthy" if ok else "unhealthy",
            "timestamp": utcnow().isoformat(),
            "checks": {
                "reading_source": {
                    "ok": ok,
                    "status": status,
                    "latest_age_sec": age_sec,
                },
            },
        },
        status_code=200 if ok else 503,
    )
