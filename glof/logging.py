"""Logging configuration for the GLOF Sentinel application."""

import logging
import sys

_configured = False

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s - %(message)s"


def configure(level: int | str = logging.INFO) -> None:
    """Configure logging for the application.

    Safe to call multiple times - only configures once.
    """
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("glof")
    root.setLevel(level)
    root.addHandler(handler)

    # Route uvicorn through the same handler so server logs share a format
    uv_log = logging.getLogger("uvicorn")
    uv_log.handlers.clear()
    uv_log.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the 'glof' namespace.

    Args:
        name: Logger name (will be prefixed with 'glof.')

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(f"glof.{name}")
