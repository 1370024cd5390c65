"""Risk transition tracking for the alerting workflow.

Provides a RiskTransitionTracker singleton that remembers the last combined
risk level per monitoring site and triggers a callback only when that level
changes (to prevent notification spam while a lake stays at one level).
Also keeps the bounded list of alerts issued by authorities, read newest
first by the public and authority dashboards.

Thread-safe: Uses a lock to protect shared state when fed from the monitor
loop and the web server at the same time.
"""

import itertools
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from glof.lib.config import RiskLevel
from glof.lib.config.constants import DEFAULT_ALERT_LIMIT, MAX_STORED_ALERTS
from glof.lib.utils import from_epoch_ms, now_ms
from glof.logging import get_logger
from glof.risk.models import RiskAssessment

logger = get_logger("lib.alerts")


@dataclass(frozen=True, slots=True)
class RiskAlertEvent:
    """Details about a combined risk level transition."""

    site_id: str
    previous_level: RiskLevel
    level: RiskLevel
    assessment: RiskAssessment

    @property
    def is_escalation(self) -> bool:
        """True when the new level is more severe than the previous one."""
        return self.level.severity > self.previous_level.severity

    @property
    def is_resolved(self) -> bool:
        """True when the site has returned to safe."""
        return self.level == RiskLevel.SAFE

    def to_dict(self) -> dict[str, Any]:
        return {
            "site_id": self.site_id,
            "previous_level": str(self.previous_level),
            "level": str(self.level),
            "is_escalation": self.is_escalation,
            "is_resolved": self.is_resolved,
            "recording_time": from_epoch_ms(
                self.assessment.timestamp
            ).strftime("%Y-%m-%d %H:%M:%S"),
            "epoch": self.assessment.timestamp,
            "assessment": self.assessment.to_dict(),
        }


type RiskAlertCallback = Callable[[RiskAlertEvent], None]


class RiskTransitionTracker:
    """Tracks combined risk per site and triggers callbacks on transitions.

    Sites start out safe, so a first assessment at warning or danger counts as
    a transition. Assessments older than the last one seen for a site are
    ignored.
    """

    def __init__(self) -> None:
        """Initialize the tracker with empty state."""
        self._lock = threading.Lock()
        self._levels: dict[str, RiskLevel] = {}
        self._last_timestamps: dict[str, int] = {}
        self._callbacks: list[RiskAlertCallback] = []

    def register_callback(self, callback: RiskAlertCallback) -> None:
        """Register a callback invoked on every risk level transition."""
        with self._lock:
            self._callbacks.append(callback)
        logger.debug("Registered risk alert callback %r", callback)

    def update(self, site_id: str, assessment: RiskAssessment) -> RiskLevel:
        """Record an assessment for a site and notify on level change.

        Returns:
            The site's combined risk level after the update.
        """
        with self._lock:
            previous = self._levels.get(site_id, RiskLevel.SAFE)
            last_seen = self._last_timestamps.get(site_id)
            if last_seen is not None and assessment.timestamp <= last_seen:
                logger.debug(
                    "[%s] ignoring stale assessment at %d",
                    site_id,
                    assessment.timestamp,
                )
                return previous
            new = assessment.combined_risk
            self._levels[site_id] = new
            self._last_timestamps[site_id] = assessment.timestamp
            callbacks = list(self._callbacks)

        if new == previous:
            return new

        event = RiskAlertEvent(
            site_id=site_id,
            previous_level=previous,
            level=new,
            assessment=assessment,
        )
        if event.is_escalation:
            logger.warning(
                "[%s] risk escalated from %s to %s on %s",
                site_id,
                previous,
                new,
                assessment.date,
            )
        else:
            logger.info(
                "[%s] risk lowered from %s to %s on %s",
                site_id,
                previous,
                new,
                assessment.date,
            )

        # Call callbacks outside of lock to prevent deadlocks
        for callback in callbacks:
            callback(event)
        return new

    def get_level(self, site_id: str) -> RiskLevel:
        """Get the current combined risk level for a site."""
        with self._lock:
            return self._levels.get(site_id, RiskLevel.SAFE)

    def reset(self, site_id: str | None = None) -> None:
        """Reset state for one site, or for all sites."""
        with self._lock:
            if site_id is None:
                self._levels.clear()
                self._last_timestamps.clear()
            else:
                self._levels.pop(site_id, None)
                self._last_timestamps.pop(site_id, None)


_tracker: RiskTransitionTracker | None = None
_tracker_lock = threading.Lock()


def get_risk_tracker() -> RiskTransitionTracker:
    """Get or create the global risk tracker instance."""
    global _tracker
    if _tracker is None:
        with _tracker_lock:
            if _tracker is None:
                _tracker = RiskTransitionTracker()
    return _tracker


def reset_risk_tracker() -> None:
    """Drop the global risk tracker, callbacks included (for testing)."""
    global _tracker
    with _tracker_lock:
        _tracker = None


@dataclass(frozen=True, slots=True)
class AuthorityAlert:
    """A message issued by an authority to the public."""

    id: str
    message: str
    created_by: str
    timestamp: int  # ms since epoch

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "message": self.message,
            "created_by": self.created_by,
            "timestamp": self.timestamp,
        }


class AuthorityAlertStore:
    """In-memory store of issued alerts, oldest dropped once full."""

    def __init__(self, max_alerts: int = MAX_STORED_ALERTS) -> None:
        self._lock = threading.Lock()
        self._alerts: deque[AuthorityAlert] = deque(maxlen=max_alerts)
        self._ids = itertools.count(1)

    def create(
        self, message: str, created_by: str, *, timestamp: int | None = None
    ) -> AuthorityAlert:
        """Store a new alert stamped with the current time."""
        with self._lock:
            alert = AuthorityAlert(
                id=f"alert_{next(self._ids)}",
                message=message,
                created_by=created_by,
                timestamp=now_ms() if timestamp is None else timestamp,
            )
            self._alerts.append(alert)
        logger.info("Alert %s issued by %s", alert.id, created_by)
        return alert

    def recent(self, limit: int = DEFAULT_ALERT_LIMIT) -> list[AuthorityAlert]:
        """Return up to ``limit`` alerts, newest first."""
        with self._lock:
            alerts = list(reversed(self._alerts))
        # Stable sort keeps later insertions first on equal timestamps
        alerts.sort(key=lambda a: a.timestamp, reverse=True)
        return alerts[:limit]

    def __len__(self) -> int:
        with self._lock:
            return len(self._alerts)


_alert_store: AuthorityAlertStore | None = None
_alert_store_lock = threading.Lock()


def get_alert_store() -> AuthorityAlertStore:
    """Get or create the global authority alert store."""
    global _alert_store
    if _alert_store is None:
        with _alert_store_lock:
            if _alert_store is None:
                _alert_store = AuthorityAlertStore()
    return _alert_store


def reset_alert_store() -> None:
    """Drop the global alert store (for testing)."""
    global _alert_store
    with _alert_store_lock:
        _alert_store = None
