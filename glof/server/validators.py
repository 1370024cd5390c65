"""Request query validation for the dashboard API."""

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from glof.lib.config import RISK_WINDOW_SIZES
from glof.lib.config.constants import (
    ALERT_AUTHOR_MAX_LENGTH,
    ALERT_MESSAGE_MAX_LENGTH,
    DEFAULT_ALERT_LIMIT,
    MAX_STORED_ALERTS,
)

MIN_DAYS = 1
MAX_DAYS = 30
DEFAULT_DAYS = 7


class InvalidParameter(Exception):
    """Raised when a query parameter is invalid."""


class WindowQuery(BaseModel):
    """Validated risk window query parameter."""

    window: int

    @field_validator("window")
    @classmethod
    def _check_window(cls, v: int) -> int:
        if v not in RISK_WINDOW_SIZES:
            raise ValueError(
                f"window must be one of {', '.join(map(str, RISK_WINDOW_SIZES))}"
            )
        return v


class DaysQuery(BaseModel):
    """Validated days query parameter."""

    days: int = Field(default=DEFAULT_DAYS, ge=MIN_DAYS, le=MAX_DAYS)


class AlertsQuery(BaseModel):
    """Validated alert list limit."""

    limit: int = Field(default=DEFAULT_ALERT_LIMIT, ge=1, le=MAX_STORED_ALERTS)


class NewAlert(BaseModel):
    """Body of an alert issued by an authority."""

    model_config = ConfigDict(str_strip_whitespace=True)

    message: str = Field(min_length=1, max_length=ALERT_MESSAGE_MAX_LENGTH)
    created_by: str = Field(
        min_length=1,
        max_length=ALERT_AUTHOR_MAX_LENGTH,
        validation_alias=AliasChoices("created_by", "createdBy"),
    )


def _parse_int(params: Any, name: str, default: int) -> int:
    raw = params.get(name, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise InvalidParameter(f"{name} needs to be an integer") from None


def parse_window(params: Any, default: int) -> int:
    """Parse and validate the ``window`` query parameter.

    Args:
        params: Object with .get() method (Request.query_params or similar)
        default: Window used when the parameter is absent.

    Raises:
        InvalidParameter: If the parameter is not an allowed window size.
    """
    try:
        return WindowQuery(window=_parse_int(params, "window", default)).window
    except ValidationError:
        raise InvalidParameter(
            f"window must be one of {', '.join(map(str, RISK_WINDOW_SIZES))}"
        ) from None


def parse_days(params: Any) -> int:
    """Parse and validate the ``days`` query parameter.

    Raises:
        InvalidParameter: If the parameter is not an integer in range.
    """
    try:
        return DaysQuery(days=_parse_int(params, "days", DEFAULT_DAYS)).days
    except ValidationError:
        raise InvalidParameter(
            f"days must be between {MIN_DAYS} and {MAX_DAYS}"
        ) from None


def parse_alert_limit(params: Any) -> int:
    """Parse and validate the ``limit`` query parameter for alerts.

    Raises:
        InvalidParameter: If the parameter is not an integer in range.
    """
    try:
        return AlertsQuery(
            limit=_parse_int(params, "limit", DEFAULT_ALERT_LIMIT)
        ).limit
    except ValidationError:
        raise InvalidParameter(
            f"limit must be between 1 and {MAX_STORED_ALERTS}"
        ) from None


def parse_new_alert(data: Any) -> NewAlert:
    """Validate the body of a new authority alert.

    Raises:
        InvalidParameter: If a field is missing, empty or too long.
    """
    try:
        return NewAlert.model_validate(data)
    except ValidationError as err:
        first = err.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        raise InvalidParameter(f"{field}: {first['msg']}") from None
