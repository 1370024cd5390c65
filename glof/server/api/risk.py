"""Risk status endpoint for the dashboard."""

from starlette.requests import Request
from starlette.responses import JSONResponse

from glof.lib.config import get_settings
from glof.lib.exceptions import ReadingSourceError
from glof.logging import get_logger
from glof.readings import get_reading_source
from glof.risk import assess_window, risk_card
from glof.server.validators import InvalidParameter, parse_window

logger = get_logger("server.api.risk")


async def get_risk(request: Request) -> JSONResponse:
    """Return risk cards for the most recent window of readings.

    Cards are ordered oldest to newest; each is assessed against the
    previous reading inside the window.
    """
    try:
        window = parse_window(
            request.query_params, get_settings().server.window_size
        )
    except InvalidParameter as err:
        return JSONResponse({"error": str(err)}, status_code=400)

    try:
        readings = await get_reading_source().fetch_recent(window)
    except ReadingSourceError:
        logger.exception("Reading source error fetching risk window")
        return JSONResponse(
            {"error": "Reading source unavailable"}, status_code=503
        )

    cards = [risk_card(a) for a in assess_window(readings)]
    return JSONResponse(
        {
            "window": window,
            "risks": cards,
            "latest": cards[-1] if cards else None,
        }
    )
