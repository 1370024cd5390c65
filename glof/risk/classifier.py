"""GLOF risk classification rules.

Turns sensor readings into discrete risk levels along two dimensions (water
level and temperature) and combines them. Every function here is pure: the
previous reading, when used for spike or persistence checks, is supplied by
the caller and never retained, so calls are safe from any thread or task.
"""

from collections.abc import Sequence

from glof.lib.config import RiskLevel
from glof.lib.config.constants import (
    AIR_DANGER_ABOVE,
    AIR_WARNING_FROM,
    LAKE_SAFE_MAX,
    LAKE_SAFE_MIN,
    WATER_DANGER_ABOVE,
    WATER_SAFE_BELOW,
    WATER_SPIKE_DELTA,
)
from glof.lib.utils import format_display_date
from glof.risk.models import Reading, RiskAssessment


def classify_water_level(
    current: float, previous: float | None = None
) -> RiskLevel:
    """Classify water-level rise (cm/day).

    A jump of more than 10 cm/day over the previous reading is danger
    whatever the absolute level. Otherwise below 5 is safe, above 20 is
    danger, and 5 to 20 inclusive is warning.
    """
    if previous is not None and current - previous > WATER_SPIKE_DELTA:
        return RiskLevel.DANGER

    if current < WATER_SAFE_BELOW:
        return RiskLevel.SAFE
    if current > WATER_DANGER_ABOVE:
        return RiskLevel.DANGER
    return RiskLevel.WARNING


def classify_temperature(
    lake_temp: float,
    air_temp: float,
    previous_air_temp: float | None = None,
) -> RiskLevel:
    """Classify lake and air temperature (Celsius).

    Air above 10 is danger and 5 to 10 inclusive is warning. Below that the
    reading is safe only while the lake stays within 0 to 5; any other
    combination is warning.
    """
    # Sustained warmth over consecutive readings; same outcome as the
    # single-reading rule below
    if (
        previous_air_temp is not None
        and air_temp > AIR_DANGER_ABOVE
        and previous_air_temp > AIR_DANGER_ABOVE
    ):
        return RiskLevel.DANGER

    if air_temp > AIR_DANGER_ABOVE:
        return RiskLevel.DANGER
    if AIR_WARNING_FROM <= air_temp <= AIR_DANGER_ABOVE:
        return RiskLevel.WARNING
    if LAKE_SAFE_MIN <= lake_temp <= LAKE_SAFE_MAX and air_temp < AIR_WARNING_FROM:
        return RiskLevel.SAFE
    return RiskLevel.WARNING


def classify_combined(
    water_level_risk: RiskLevel, temperature_risk: RiskLevel
) -> RiskLevel:
    """Combine dimension risks into the most severe of the two."""
    if RiskLevel.DANGER in (water_level_risk, temperature_risk):
        return RiskLevel.DANGER
    if RiskLevel.WARNING in (water_level_risk, temperature_risk):
        return RiskLevel.WARNING
    return RiskLevel.SAFE


def assess(current: Reading, previous: Reading | None = None) -> RiskAssessment:
    """Assess a reading, optionally against its immediate predecessor."""
    water_level_risk = classify_water_level(
        current.water_level_rise,
        previous.water_level_rise if previous is not None else None,
    )
    temperature_risk = classify_temperature(
        current.lake_temperature,
        current.air_temperature,
        previous.air_temperature if previous is not None else None,
    )
    return RiskAssessment(
        timestamp=current.timestamp,
        date=format_display_date(current.timestamp),
        water_level_risk=water_level_risk,
        temperature_risk=temperature_risk,
        combined_risk=classify_combined(water_level_risk, temperature_risk),
    )


def assess_window(readings: Sequence[Reading]) -> list[RiskAssessment]:
    """Assess each reading of a chronological window against its predecessor.

    The first reading is assessed on its own; the window is not extended
    backwards. Output keeps the input order.
    """
    return [
        assess(reading, readings[index - 1] if index > 0 else None)
        for index, reading in enumerate(readings)
    ]
