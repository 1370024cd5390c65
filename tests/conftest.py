"""Shared pytest fixtures for the test suite."""

import logging

import pytest

from glof.lib.alerts import (
    get_risk_tracker,
    reset_alert_store,
    reset_risk_tracker,
)
from glof.lib.config import SensorStatus, Settings
from glof.lib.config.testing import set_settings
from glof.readings import reset_reading_source
from glof.risk import Reading

# 2024-06-15 12:00:00 UTC
FROZEN_MS = 1718452800000
ONE_DAY_MS = 24 * 60 * 60 * 1000


def make_reading(
    water_level_rise: float = 2.0,
    lake_temperature: float = 2.0,
    air_temperature: float = 3.0,
    *,
    timestamp: int = FROZEN_MS,
    sensor_battery: int = 90,
    sensor_status: SensorStatus = SensorStatus.ACTIVE,
) -> Reading:
    """Build a reading; defaults classify as safe on every dimension."""
    return Reading(
        timestamp=timestamp,
        water_level_rise=water_level_rise,
        lake_temperature=lake_temperature,
        air_temperature=air_temperature,
        sensor_battery=sensor_battery,
        sensor_status=sensor_status,
    )


@pytest.fixture(autouse=True)
def configure_caplog(caplog):
    """Ensure caplog captures logs from the glof namespace."""
    caplog.set_level(logging.INFO, logger="glof")


@pytest.fixture(autouse=True)
def reset_tracker():
    """Reset the global risk tracker before and after each test."""
    reset_risk_tracker()
    yield
    reset_risk_tracker()


@pytest.fixture(autouse=True)
def reset_alerts():
    """Reset the global authority alert store before and after each test."""
    reset_alert_store()
    yield
    reset_alert_store()


@pytest.fixture(autouse=True)
def demo_settings():
    """Use deterministic demo settings, reset after each test."""
    settings = Settings(demo_mode=True, mock_seed=42, history_days=7)
    set_settings(settings)
    reset_reading_source()
    yield settings
    set_settings(None)
    reset_reading_source()


@pytest.fixture
def live_settings():
    """Switch to live mode, where readings are ingested into memory."""
    settings = Settings(demo_mode=False)
    set_settings(settings)
    reset_reading_source()
    return settings


@pytest.fixture
def frozen_ms():
    """Return a fixed epoch-ms timestamp for deterministic tests."""
    return FROZEN_MS


@pytest.fixture
def sample_reading():
    """Create a reading that is safe on both dimensions."""
    return make_reading()


@pytest.fixture
def risk_alert_events():
    """Capture risk alert events emitted by the global tracker.

    Returns:
        A list populated with RiskAlertEvent objects as they are emitted.
    """
    from glof.lib.alerts import RiskAlertEvent

    events: list[RiskAlertEvent] = []
    get_risk_tracker().register_callback(events.append)
    return events
