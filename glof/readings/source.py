"""Reading sources supplying ordered windows of sensor readings.

A source hands out the most recent readings newest last. It owns ordering
and validation; the classifier trusts what it is given.
"""

import random
import threading
from collections.abc import Iterable
from typing import Protocol

from glof.lib.config import get_settings
from glof.lib.exceptions import ReadingValidationError
from glof.lib.mock import generate_mock_readings
from glof.logging import get_logger
from glof.risk.models import Reading

logger = get_logger("readings.source")


class ReadingSource(Protocol):
    """Protocol for anything that can supply recent readings."""

    async def fetch_recent(self, n: int) -> list[Reading]:
        """Return up to ``n`` most recent readings, newest last."""
        ...


def _check_count(n: int) -> None:
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n}")


class InMemoryReadingSource:
    """Reading source backed by a list held in memory.

    Thread-safe: readings may be added from a producer while other callers
    fetch windows.
    """

    def __init__(self, readings: Iterable[Reading] = ()) -> None:
        self._lock = threading.Lock()
        self._readings: list[Reading] = []
        for reading in sorted(readings, key=lambda r: r.timestamp):
            self._append(reading)

    def _append(self, reading: Reading) -> Reading | None:
        previous = self._readings[-1] if self._readings else None
        if previous is not None and reading.timestamp <= previous.timestamp:
            raise ReadingValidationError(
                f"timestamp {reading.timestamp} does not follow "
                f"{previous.timestamp}"
            )
        self._readings.append(reading)
        return previous

    def add(self, reading: Reading) -> Reading | None:
        """Append a reading; its timestamp must follow the latest one.

        Returns:
            The reading that was latest before this one, if any.
        """
        with self._lock:
            previous = self._append(reading)
        logger.debug("Added reading at %d", reading.timestamp)
        return previous

    def __len__(self) -> int:
        with self._lock:
            return len(self._readings)

    async def fetch_recent(self, n: int) -> list[Reading]:
        """Return up to ``n`` most recent readings, newest last."""
        _check_count(n)
        with self._lock:
            return self._readings[-n:]


class MockReadingSource:
    """Demo reading source generating fresh mock history on every fetch."""

    def __init__(self, history_days: int = 7, seed: int | None = None) -> None:
        self._history_days = history_days
        self._seed = seed

    async def fetch_recent(self, n: int) -> list[Reading]:
        """Return up to ``n`` most recent mock readings, newest last."""
        _check_count(n)
        rng = random.Random(self._seed)
        readings = generate_mock_readings(self._history_days, rng=rng)
        return readings[-n:]


_source: ReadingSource | None = None
_source_lock = threading.Lock()


def get_reading_source() -> ReadingSource:
    """Get the global reading source (thread-safe).

    Demo mode serves generated data; otherwise an in-memory source filled
    through ``POST /api/readings``.
    """
    global _source
    if _source is None:
        with _source_lock:
            if _source is None:
                cfg = get_settings().readings
                if cfg.demo_mode:
                    logger.info("Demo mode enabled, serving mock readings")
                    _source = MockReadingSource(
                        history_days=cfg.history_days, seed=cfg.mock_seed
                    )
                else:
                    _source = InMemoryReadingSource()
    return _source


def reset_reading_source() -> None:
    """Drop the global reading source (for testing)."""
    global _source
    with _source_lock:
        _source = None
