"""Tests for the dashboard risk endpoint."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from glof.lib.exceptions import ReadingSourceError
from glof.readings import InMemoryReadingSource
from glof.server.api.risk import get_risk
from tests.conftest import FROZEN_MS, ONE_DAY_MS, make_reading


def _make_request(query_params: dict[str, str] | None = None):
    """Create a mock Starlette request."""
    request = MagicMock()
    request.query_params = query_params or {}
    return request


def _source():
    return InMemoryReadingSource(
        [
            make_reading(2, timestamp=FROZEN_MS - 3 * ONE_DAY_MS),
            make_reading(2, timestamp=FROZEN_MS - 2 * ONE_DAY_MS),
            make_reading(3, timestamp=FROZEN_MS - ONE_DAY_MS),
            make_reading(14, 2, 7, timestamp=FROZEN_MS),
        ]
    )


class TestGetRisk:
    """Tests for get_risk endpoint."""

    @pytest.mark.asyncio
    async def test_returns_default_window(self):
        with patch("glof.server.api.risk.get_reading_source", return_value=_source()):
            response = await get_risk(_make_request())

        assert response.status_code == 200
        body = json.loads(response.body)
        assert body["window"] == 3
        assert len(body["risks"]) == 3
        assert [c["level"] for c in body["risks"]] == ["safe", "safe", "danger"]
        assert body["latest"]["water_level_risk"] == "danger"
        assert body["latest"]["temperature_risk"] == "warning"
        assert body["latest"]["message"] == "GLOF Alert - High Risk"
        assert body["latest"]["date"] == "2024-06-15"

    @pytest.mark.asyncio
    async def test_accepts_week_window(self):
        with patch("glof.server.api.risk.get_reading_source", return_value=_source()):
            response = await get_risk(_make_request({"window": "7"}))

        body = json.loads(response.body)
        assert body["window"] == 7
        assert len(body["risks"]) == 4

    @pytest.mark.asyncio
    async def test_empty_source(self):
        with patch(
            "glof.server.api.risk.get_reading_source",
            return_value=InMemoryReadingSource(),
        ):
            response = await get_risk(_make_request())

        body = json.loads(response.body)
        assert body["risks"] == []
        assert body["latest"] is None

    @pytest.mark.asyncio
    async def test_demo_mode_serves_mock_data(self):
        response = await get_risk(_make_request())

        body = json.loads(response.body)
        assert response.status_code == 200
        assert len(body["risks"]) == 3
        assert body["latest"]["level"] in {"warning", "danger"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("window", ["5", "0", "abc", "3.5"])
    async def test_invalid_window_returns_400(self, window):
        response = await get_risk(_make_request({"window": window}))

        assert response.status_code == 400
        assert b"error" in response.body

    @pytest.mark.asyncio
    async def test_source_error_returns_503(self):
        source = MagicMock()
        source.fetch_recent = AsyncMock(side_effect=ReadingSourceError())

        with patch("glof.server.api.risk.get_reading_source", return_value=source):
            response = await get_risk(_make_request())

        assert response.status_code == 503
        assert b"Reading source unavailable" in response.body
