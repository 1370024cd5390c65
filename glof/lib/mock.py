"""Mock sensor data for demo mode and development.

Produces a week of daily readings with realistic variation, ending with a
warning scenario today after two safe days, so the dashboard always has
something to show without a live sensor feed.
"""

import math
import random

from glof.lib.utils import ONE_DAY_MS, now_ms
from glof.risk.models import Reading, derive_sensor_status


def _round1(value: float) -> float:
    return round(value * 10) / 10


def generate_mock_readings(
    days_back: int = 7,
    *,
    now: int | None = None,
    rng: random.Random | None = None,
) -> list[Reading]:
    """Generate one reading per day for the last ``days_back`` days and today.

    Args:
        days_back: Number of days before today to cover.
        now: Timestamp (ms) of today's reading; defaults to the current time.
        rng: Random source, for reproducible data.

    Returns:
        ``days_back + 1`` readings ordered oldest first.
    """
    rng = rng or random.Random()
    now = now if now is not None else now_ms()
    readings: list[Reading] = []

    for i in range(days_back, -1, -1):
        timestamp = now - i * ONE_DAY_MS

        water_level_rise = 3 + math.sin(i * 0.5) * 2 + rng.random() * 2
        lake_temperature = 2 + math.sin(i * 0.3) * 1.5 + rng.random()
        air_temperature = 3 + math.sin(i * 0.4) * 2 + rng.random() * 2

        if i == 0:
            # Today: warning scenario
            water_level_rise = 8 + rng.random() * 2
            air_temperature = 7 + rng.random() * 2
        elif i == 1:
            water_level_rise = 3 + rng.random()
            air_temperature = 4 + rng.random()
        elif i == 2:
            water_level_rise = 2 + rng.random()
            air_temperature = 3 + rng.random()

        battery = round(min(100.0, max(20.0, 100 - i * 2 + rng.random() * 5)))

        readings.append(
            Reading(
                timestamp=timestamp,
                water_level_rise=_round1(water_level_rise),
                lake_temperature=_round1(lake_temperature),
                air_temperature=_round1(air_temperature),
                sensor_battery=battery,
                sensor_status=derive_sensor_status(battery),
            )
        )

    return readings
