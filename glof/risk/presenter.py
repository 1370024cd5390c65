"""Display mapping for risk levels.

A fixed lookup from risk level to dashboard colour, emoji and message. It is
not part of classification and carries no logic beyond the table.
"""

from dataclasses import dataclass
from typing import Any

from glof.lib.config import RiskLevel
from glof.risk.models import RiskAssessment


@dataclass(frozen=True, slots=True)
class RiskPresentation:
    """How a risk level is shown on the dashboard."""

    level: RiskLevel
    label: str
    color: str
    emoji: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": str(self.level),
            "label": self.label,
            "color": self.color,
            "emoji": self.emoji,
            "message": self.message,
        }


_PRESENTATIONS: dict[RiskLevel, RiskPresentation] = {
    RiskLevel.SAFE: RiskPresentation(
        level=RiskLevel.SAFE,
        label="SAFE",
        color="#22c55e",
        emoji="\N{LARGE GREEN CIRCLE}",
        message="Safe Conditions",
    ),
    RiskLevel.WARNING: RiskPresentation(
        level=RiskLevel.WARNING,
        label="WARNING",
        color="#eab308",
        emoji="\N{LARGE YELLOW CIRCLE}",
        message="Warning - Monitor Closely",
    ),
    RiskLevel.DANGER: RiskPresentation(
        level=RiskLevel.DANGER,
        label="DANGER",
        color="#dc2626",
        emoji="\N{LARGE RED CIRCLE}",
        message="GLOF Alert - High Risk",
    ),
}


def present(level: RiskLevel) -> RiskPresentation:
    """Look up the display mapping for a risk level."""
    return _PRESENTATIONS[level]


def risk_card(assessment: RiskAssessment) -> dict[str, Any]:
    """Build a dashboard card: the assessment plus its combined-risk display."""
    return {
        **assessment.to_dict(),
        **present(assessment.combined_risk).to_dict(),
    }
