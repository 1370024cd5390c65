"""Centralized configuration for the GLOF Sentinel application.

This package provides:
- Enums for risk levels and sensor status
- Fixed classification thresholds
- Pydantic settings models for configuration
"""

from .enums import RiskLevel, SensorStatus
from .settings import (
    RISK_WINDOW_SIZES,
    MonitorSettings,
    ReadingSourceSettings,
    ServerSettings,
    Settings,
    get_settings,
)

__all__ = [
    # Enums
    "RiskLevel",
    "SensorStatus",
    # Settings models
    "MonitorSettings",
    "ReadingSourceSettings",
    "ServerSettings",
    "Settings",
    # Constants
    "RISK_WINDOW_SIZES",
    # Functions
    "get_settings",
]
