"""Custom exceptions for the GLOF Sentinel application.

The classification engine itself never raises: these cover the layers around
it that turn raw sensor documents into readings and serve them.
"""


class GlofSentinelError(Exception):
    """Base exception for all application errors."""


class ReadingValidationError(GlofSentinelError):
    """Raised when a raw sensor document cannot become a Reading."""


class ReadingSourceError(GlofSentinelError):
    """Raised when a reading source cannot supply readings."""

    def __init__(self, message: str = "Reading source unavailable") -> None:
        super().__init__(message)
