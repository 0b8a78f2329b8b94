"""Pytest configuration and fixtures for weather_lookup_core tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

LISBON_GEOCODING: dict[str, Any] = {
    "results": [
        {
            "id": 2267057,
            "name": "Lisbon",
            "latitude": 38.71667,
            "longitude": -9.13333,
            "country": "Portugal",
            "admin1": "Lisbon",
        }
    ],
    "generationtime_ms": 0.7,
}

LISBON_FORECAST: dict[str, Any] = {
    "latitude": 38.72,
    "longitude": -9.14,
    "timezone": "Europe/Lisbon",
    "current": {
        "time": "2026-10-19T14:00",
        "temperature_2m": 21.4,
        "relative_humidity_2m": 63,
        "wind_speed_10m": 12.3,
        "weather_code": 0,
    },
}


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_data is not None:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
