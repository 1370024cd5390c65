"""Tests for reading sources."""

import pytest

from glof.lib.config import Settings
from glof.lib.config.testing import set_settings
from glof.lib.exceptions import ReadingValidationError
from glof.readings import (
    InMemoryReadingSource,
    MockReadingSource,
    get_reading_source,
    reset_reading_source,
)
from tests.conftest import FROZEN_MS, ONE_DAY_MS, make_reading


def _readings(count):
    return [
        make_reading(float(i), timestamp=FROZEN_MS + i * ONE_DAY_MS)
        for i in range(count)
    ]


class TestInMemoryReadingSource:
    """Tests for InMemoryReadingSource."""

    @pytest.mark.asyncio
    async def test_fetch_recent_returns_newest_last(self):
        source = InMemoryReadingSource(_readings(5))

        result = await source.fetch_recent(3)

        assert [r.water_level_rise for r in result] == [2.0, 3.0, 4.0]

    @pytest.mark.asyncio
    async def test_fetch_recent_with_short_history(self):
        source = InMemoryReadingSource(_readings(2))

        result = await source.fetch_recent(7)

        assert len(result) == 2

    @pytest.mark.asyncio
    async def test_empty_source(self):
        assert await InMemoryReadingSource().fetch_recent(3) == []

    @pytest.mark.asyncio
    async def test_initial_readings_are_sorted(self):
        source = InMemoryReadingSource(reversed(_readings(3)))

        result = await source.fetch_recent(3)

        assert [r.timestamp for r in result] == sorted(r.timestamp for r in result)

    @pytest.mark.asyncio
    async def test_add_appends(self):
        source = InMemoryReadingSource(_readings(2))
        source.add(make_reading(9.0, timestamp=FROZEN_MS + 10 * ONE_DAY_MS))

        result = await source.fetch_recent(1)

        assert result[0].water_level_rise == 9.0
        assert len(source) == 3

    def test_add_returns_previous_latest(self):
        source = InMemoryReadingSource()
        first = make_reading(timestamp=FROZEN_MS)

        assert source.add(first) is None
        assert source.add(make_reading(timestamp=FROZEN_MS + ONE_DAY_MS)) == first

    def test_add_rejects_out_of_order_reading(self):
        source = InMemoryReadingSource(_readings(2))

        with pytest.raises(ReadingValidationError, match="does not follow"):
            source.add(make_reading(timestamp=FROZEN_MS))

    def test_duplicate_timestamps_rejected(self):
        with pytest.raises(ReadingValidationError):
            InMemoryReadingSource([make_reading(), make_reading()])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("n", [0, -1])
    async def test_non_positive_count_rejected(self, n):
        with pytest.raises(ValueError, match="positive"):
            await InMemoryReadingSource(_readings(2)).fetch_recent(n)

    @pytest.mark.asyncio
    async def test_returned_list_is_a_copy(self):
        source = InMemoryReadingSource(_readings(3))

        result = await source.fetch_recent(3)
        result.clear()

        assert len(await source.fetch_recent(3)) == 3


class TestMockReadingSource:
    """Tests for MockReadingSource."""

    @pytest.mark.asyncio
    async def test_returns_requested_window(self):
        source = MockReadingSource(history_days=7, seed=3)

        result = await source.fetch_recent(3)

        assert len(result) == 3
        assert result[0].timestamp < result[1].timestamp < result[2].timestamp

    @pytest.mark.asyncio
    async def test_window_larger_than_history(self):
        source = MockReadingSource(history_days=2, seed=3)

        assert len(await source.fetch_recent(7)) == 3


class TestGetReadingSource:
    """Tests for the global reading source."""

    def test_demo_mode_uses_mock_source(self):
        assert isinstance(get_reading_source(), MockReadingSource)

    def test_live_mode_uses_in_memory_source(self):
        set_settings(Settings(demo_mode=False))
        reset_reading_source()

        assert isinstance(get_reading_source(), InMemoryReadingSource)

    def test_source_is_cached(self):
        assert get_reading_source() is get_reading_source()
