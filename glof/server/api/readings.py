"""Readings endpoints: raw history for the authority dashboard and ingest."""

from starlette.requests import Request
from starlette.responses import JSONResponse

from glof.lib.alerts import get_risk_tracker
from glof.lib.config import get_settings
from glof.lib.exceptions import ReadingSourceError, ReadingValidationError
from glof.logging import get_logger
from glof.readings import InMemoryReadingSource, get_reading_source
from glof.risk import Reading, assess, risk_card
from glof.server.validators import InvalidParameter, parse_days

logger = get_logger("server.api.readings")


async def get_readings(request: Request) -> JSONResponse:
    """Return recent readings (newest last) and the latest one."""
    try:
        days = parse_days(request.query_params)
    except InvalidParameter as err:
        return JSONResponse({"error": str(err)}, status_code=400)

    try:
        readings = await get_reading_source().fetch_recent(days)
    except ReadingSourceError:
        logger.exception("Reading source error fetching readings")
        return JSONResponse(
            {"error": "Reading source unavailable"}, status_code=503
        )

    data = [r.to_dict() for r in readings]
    return JSONResponse(
        {
            "days": days,
            "data": data,
            "latest": data[-1] if data else None,
        }
    )


async def receive_reading(request: Request) -> JSONResponse:
    """Validate and store a sensor reading, then assess it.

    The new reading is assessed against the one stored before it and the
    result is fed to the risk tracker for the configured site.
    """
    source = get_reading_source()
    if not isinstance(source, InMemoryReadingSource):
        return JSONResponse(
            {"error": "Reading ingest is disabled in demo mode"},
            status_code=409,
        )

    try:
        data = await request.json()
    except Exception:
        logger.warning("Received empty or invalid JSON payload")
        return JSONResponse({"error": "Invalid JSON payload"}, status_code=400)

    if not isinstance(data, dict):
        logger.warning("Received non-dict JSON: %s", type(data).__name__)
        return JSONResponse({"error": "Expected JSON object"}, status_code=400)

    try:
        reading = Reading.from_dict(data)
        previous = source.add(reading)
    except ReadingValidationError as err:
        logger.warning("Rejected reading: %s", err)
        return JSONResponse({"error": str(err)}, status_code=400)

    assessment = assess(reading, previous)
    get_risk_tracker().update(get_settings().monitor.site_id, assessment)

    return JSONResponse(
        {"reading": reading.to_dict(), "risk": risk_card(assessment)},
        status_code=201,
    )
