"""Periodic GLOF risk monitor.

Every refresh interval the monitor fetches the two most recent readings,
assesses the newest against its predecessor and hands the result to the
risk transition tracker, which notifies registered callbacks when the
combined level changes.
"""

from typing import override

from glof.lib.alerts import (
    RiskAlertEvent,
    RiskTransitionTracker,
    get_risk_tracker,
)
from glof.lib.config import get_settings
from glof.lib.exceptions import ReadingSourceError
from glof.lib.polling import PollingService
from glof.logging import configure, get_logger
from glof.readings import ReadingSource, get_reading_source
from glof.risk import Reading, RiskAssessment, assess

logger = get_logger("monitor.service")

type _ReadingPair = tuple[Reading, Reading | None]


class RiskMonitor(PollingService[_ReadingPair]):
    """Polling service assessing the latest reading on a fixed cadence."""

    def __init__(
        self,
        source: ReadingSource,
        tracker: RiskTransitionTracker,
        site_id: str,
        frequency_sec: float,
    ) -> None:
        super().__init__(name="risk-monitor", frequency_sec=frequency_sec)
        self._source = source
        self._tracker = tracker
        self._site_id = site_id
        self.last_assessment: RiskAssessment | None = None

    @override
    async def initialize(self) -> None:
        logger.info(
            "Monitoring site %s every %ss", self._site_id, self.frequency_sec
        )

    @override
    async def cleanup(self) -> None:
        self.last_assessment = None

    @override
    async def poll(self) -> _ReadingPair | None:
        """Fetch the newest reading and its predecessor, if any."""
        readings = await self._source.fetch_recent(2)
        if not readings:
            logger.debug("No readings available yet")
            return None
        current = readings[-1]
        previous = readings[-2] if len(readings) > 1 else None
        return current, previous

    @override
    async def process(self, data: _ReadingPair) -> None:
        """Assess the pair and feed the transition tracker."""
        current, previous = data
        assessment = assess(current, previous)
        self.last_assessment = assessment
        logger.info(
            "Assessed %s: water=%s temperature=%s combined=%s",
            assessment.date,
            assessment.water_level_risk,
            assessment.temperature_risk,
            assessment.combined_risk,
        )
        self._tracker.update(self._site_id, assessment)

    @override
    def on_poll_error(self, error: Exception) -> None:
        """Source outages are expected; log them and keep polling."""
        if isinstance(error, ReadingSourceError):
            logger.warning("Reading source unavailable: %s", error)
        else:
            super().on_poll_error(error)


def _log_alert(event: RiskAlertEvent) -> None:
    """Default alert sink; delivery transports register their own callbacks."""
    logger.info("Risk alert: %s", event.to_dict())


def main() -> None:
    """Main entry point for the risk monitor."""
    settings = get_settings()
    configure(settings.log_level)
    tracker = get_risk_tracker()
    tracker.register_callback(_log_alert)
    service = RiskMonitor(
        source=get_reading_source(),
        tracker=tracker,
        site_id=settings.monitor.site_id,
        frequency_sec=settings.monitor.refresh_interval_sec,
    )
    service.run()


if __name__ == "__main__":
    main()
