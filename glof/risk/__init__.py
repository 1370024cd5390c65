"""Risk classification engine and its value types."""

from .classifier import (
    assess,
    assess_window,
    classify_combined,
    classify_temperature,
    classify_water_level,
)
from .models import Reading, RiskAssessment, derive_sensor_status
from .presenter import RiskPresentation, present, risk_card

__all__ = [
    "Reading",
    "RiskAssessment",
    "RiskPresentation",
    "assess",
    "assess_window",
    "classify_combined",
    "classify_temperature",
    "classify_water_level",
    "derive_sensor_status",
    "present",
    "risk_card",
]
