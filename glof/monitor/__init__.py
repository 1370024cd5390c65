"""Periodic risk monitor feeding the alerting workflow."""

from .service import RiskMonitor, main

__all__ = ["RiskMonitor", "main"]
