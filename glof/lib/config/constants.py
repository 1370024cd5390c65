"""Classification thresholds and sensor health cut-offs.

These are fixed rules, not runtime settings: the classifier is a pure
function of its arguments and must not read configuration.
"""

# Water-level rise bands (cm/day)
WATER_SAFE_BELOW = 5.0  # rise < 5 is safe
WATER_DANGER_ABOVE = 20.0  # rise > 20 is danger, 5..20 inclusive is warning

# Increase over the previous reading that counts as a spike (cm/day)
WATER_SPIKE_DELTA = 10.0

# Air temperature bands (Celsius)
AIR_WARNING_FROM = 5.0  # 5..10 inclusive is warning
AIR_DANGER_ABOVE = 10.0

# Lake temperature range considered safe when air is cold (Celsius)
LAKE_SAFE_MIN = 0.0
LAKE_SAFE_MAX = 5.0

# Battery cut-offs for sensor status (%)
BATTERY_ACTIVE_ABOVE = 30
BATTERY_WARNING_ABOVE = 15

# Authority-issued alerts
MAX_STORED_ALERTS = 100
ALERT_MESSAGE_MAX_LENGTH = 500
ALERT_AUTHOR_MAX_LENGTH = 100
DEFAULT_ALERT_LIMIT = 10
