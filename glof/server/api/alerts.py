"""Authority alert endpoints shared by the public and authority views."""

from starlette.requests import Request
from starlette.responses import JSONResponse

from glof.lib.alerts import get_alert_store
from glof.logging import get_logger
from glof.server.validators import (
    InvalidParameter,
    parse_alert_limit,
    parse_new_alert,
)

logger = get_logger("server.api.alerts")


async def get_alerts(request: Request) -> JSONResponse:
    """Return the most recent alerts, newest first."""
    try:
        limit = parse_alert_limit(request.query_params)
    except InvalidParameter as err:
        return JSONResponse({"error": str(err)}, status_code=400)

    alerts = get_alert_store().recent(limit)
    return JSONResponse({"alerts": [a.to_dict() for a in alerts]})


async def create_alert(request: Request) -> JSONResponse:
    """Store an alert issued by an authority."""
    try:
        data = await request.json()
    except Exception:
        logger.warning("Received empty or invalid JSON payload")
        return JSONResponse({"error": "Invalid JSON payload"}, status_code=400)

    try:
        new = parse_new_alert(data)
    except InvalidParameter as err:
        logger.warning("Rejected alert: %s", err)
        return JSONResponse({"error": str(err)}, status_code=400)

    alert = get_alert_store().create(new.message, new.created_by)
    return JSONResponse(alert.to_dict(), status_code=201)
