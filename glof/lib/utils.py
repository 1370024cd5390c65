"""Shared utility functions."""

from datetime import UTC, datetime

_DISPLAY_DATE_FMT = "%Y-%m-%d"

ONE_DAY_MS = 24 * 60 * 60 * 1000


def utcnow() -> datetime:
    """Return current UTC time as an aware datetime."""
    return datetime.now(UTC)


def now_ms() -> int:
    """Return the current time in milliseconds since epoch."""
    return to_epoch_ms(utcnow())


def to_epoch_ms(dt: datetime) -> int:
    """Convert a datetime to milliseconds since epoch."""
    return int(dt.timestamp() * 1000)


def from_epoch_ms(timestamp: int) -> datetime:
    """Convert milliseconds since epoch to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp / 1000, UTC)


def format_display_date(timestamp: int) -> str:
    """Format an epoch-ms timestamp as a UTC calendar date for display."""
    return from_epoch_ms(timestamp).strftime(_DISPLAY_DATE_FMT)
