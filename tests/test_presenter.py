"""Tests for the risk level display mapping."""

from glof.lib.config import RiskLevel
from glof.risk import assess, present, risk_card
from tests.conftest import FROZEN_MS, make_reading


class TestPresent:
    """Tests for present."""

    def test_every_level_has_a_presentation(self):
        for level in RiskLevel:
            assert present(level).level == level

    def test_danger(self):
        presentation = present(RiskLevel.DANGER)

        assert presentation.color == "#dc2626"
        assert presentation.emoji == "\N{LARGE RED CIRCLE}"
        assert presentation.message == "GLOF Alert - High Risk"
        assert presentation.label == "DANGER"

    def test_warning(self):
        presentation = present(RiskLevel.WARNING)

        assert presentation.color == "#eab308"
        assert presentation.message == "Warning - Monitor Closely"

    def test_safe(self):
        presentation = present(RiskLevel.SAFE)

        assert presentation.color == "#22c55e"
        assert presentation.message == "Safe Conditions"


class TestRiskCard:
    """Tests for risk_card."""

    def test_card_uses_combined_risk(self):
        card = risk_card(assess(make_reading(25, 1, 2)))

        assert card["timestamp"] == FROZEN_MS
        assert card["water_level_risk"] == "danger"
        assert card["temperature_risk"] == "safe"
        assert card["level"] == "danger"
        assert card["label"] == "DANGER"
        assert card["color"] == "#dc2626"
