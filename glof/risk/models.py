"""Domain models for sensor readings and risk assessments."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from glof.lib.config import RiskLevel, SensorStatus
from glof.lib.config.constants import BATTERY_ACTIVE_ABOVE, BATTERY_WARNING_ABOVE
from glof.lib.exceptions import ReadingValidationError

# Sensor documents use camelCase field names
_FIELD_ALIASES = {
    "timestamp": "timestamp",
    "water_level_rise": "waterLevelRise",
    "lake_temperature": "lakeTemperature",
    "air_temperature": "airTemperature",
    "sensor_battery": "sensorBattery",
    "sensor_status": "sensorStatus",
}


def derive_sensor_status(battery: float) -> SensorStatus:
    """Derive sensor health from battery charge."""
    if battery > BATTERY_ACTIVE_ABOVE:
        return SensorStatus.ACTIVE
    if battery > BATTERY_WARNING_ABOVE:
        return SensorStatus.WARNING
    return SensorStatus.ERROR


@dataclass(frozen=True, slots=True)
class Reading:
    """A single timestamped sensor observation."""

    timestamp: int  # ms since epoch
    water_level_rise: float  # cm/day
    lake_temperature: float  # Celsius
    air_temperature: float  # Celsius
    sensor_battery: int = 100  # %
    sensor_status: SensorStatus = SensorStatus.ACTIVE

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Reading:
        """Create a validated reading from a raw sensor document.

        Accepts either snake_case or the document's camelCase field names.
        When no status is given it is derived from the battery level.

        Raises:
            ReadingValidationError: If the input data is invalid.
        """
        timestamp = cls._validate_timestamp(cls._get(raw, "timestamp"))
        battery = cls._validate_battery(cls._get(raw, "sensor_battery"))
        raw_status = cls._get(raw, "sensor_status", required=False)
        status = (
            derive_sensor_status(battery)
            if raw_status is None
            else cls._validate_status(raw_status)
        )
        return cls(
            timestamp=timestamp,
            water_level_rise=cls._validate_number(
                "water_level_rise", cls._get(raw, "water_level_rise")
            ),
            lake_temperature=cls._validate_number(
                "lake_temperature", cls._get(raw, "lake_temperature")
            ),
            air_temperature=cls._validate_number(
                "air_temperature", cls._get(raw, "air_temperature")
            ),
            sensor_battery=battery,
            sensor_status=status,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert reading to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "water_level_rise": self.water_level_rise,
            "lake_temperature": self.lake_temperature,
            "air_temperature": self.air_temperature,
            "sensor_battery": self.sensor_battery,
            "sensor_status": str(self.sensor_status),
        }

    @staticmethod
    def _get(raw: Mapping[str, Any], name: str, *, required: bool = True) -> Any:
        """Look up a field by its snake_case or camelCase name."""
        if name in raw:
            return raw[name]
        alias = _FIELD_ALIASES[name]
        if alias in raw:
            return raw[alias]
        if required:
            raise ReadingValidationError(f"{name} is required")
        return None

    @staticmethod
    def _validate_number(name: str, value: Any) -> float:
        """Validate a value is a real number (bools are rejected)."""
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ReadingValidationError(
                f"{name} must be a number, got {type(value).__name__}"
            )
        if value != value:  # NaN
            raise ReadingValidationError(f"{name} must not be NaN")
        return float(value)

    @staticmethod
    def _validate_timestamp(value: Any) -> int:
        """Validate timestamp is a non-negative integer of milliseconds."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ReadingValidationError(
                f"timestamp must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise ReadingValidationError(
                f"timestamp must not be negative, got {value}"
            )
        return value

    @staticmethod
    def _validate_battery(value: Any) -> int:
        """Validate battery is a percentage between 0 and 100."""
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ReadingValidationError(
                f"sensor_battery must be a number, got {type(value).__name__}"
            )
        if not (0 <= value <= 100):
            raise ReadingValidationError(
                f"sensor_battery must be between 0 and 100, got {value}"
            )
        return round(value)

    @staticmethod
    def _validate_status(value: Any) -> SensorStatus:
        """Validate status is one of the known sensor states."""
        try:
            return SensorStatus(value)
        except ValueError:
            raise ReadingValidationError(
                f"sensor_status must be one of "
                f"{', '.join(s.value for s in SensorStatus)}, got {value!r}"
            ) from None


@dataclass(frozen=True, slots=True)
class RiskAssessment:
    """Risk classification of one reading. Recomputed on demand, never stored."""

    timestamp: int
    date: str
    water_level_risk: RiskLevel
    temperature_risk: RiskLevel
    combined_risk: RiskLevel

    def to_dict(self) -> dict[str, Any]:
        """Convert assessment to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "date": self.date,
            "water_level_risk": str(self.water_level_risk),
            "temperature_risk": str(self.temperature_risk),
            "combined_risk": str(self.combined_risk),
        }
