"""Dashboard API server."""

from .entrypoint import create_app

__all__ = ["create_app"]
