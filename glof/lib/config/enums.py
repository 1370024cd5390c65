"""Enumerations for the GLOF Sentinel application."""

from enum import StrEnum


class RiskLevel(StrEnum):
    """Discrete GLOF risk level, ordered safe < warning < danger."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"

    @property
    def severity(self) -> int:
        """Rank used for ordering; higher is more severe."""
        return _SEVERITY[self]


_SEVERITY: dict[RiskLevel, int] = {
    RiskLevel.SAFE: 0,
    RiskLevel.WARNING: 1,
    RiskLevel.DANGER: 2,
}


class SensorStatus(StrEnum):
    """Sensor health status, derived from battery charge."""

    ACTIVE = "active"
    WARNING = "warning"
    ERROR = "error"

