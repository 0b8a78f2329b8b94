"""Fetch current conditions for resolved coordinates."""

from __future__ import annotations

import logging

from .domains.weather import CurrentConditions, SearchTransportError
from .errors import WeatherLookupError
from .http import OpenMeteoHttpClient

_LOGGER = logging.getLogger(__name__)


class WeatherFetcher:
    """Fetch the current-conditions reading for a coordinate pair."""

    def __init__(self, client: OpenMeteoHttpClient) -> None:
        self._client = client

    async def fetch_current(
        self, latitude: float, longitude: float
    ) -> CurrentConditions | SearchTransportError:
        """Fetch current conditions; failures come back as SearchTransportError."""
        try:
            current = await self._client.fetch_current(latitude, longitude)
            conditions = CurrentConditions.from_forecast_current(current)
        except WeatherLookupError as err:
            _LOGGER.warning(
                "Forecast for (%s, %s) failed: %s", latitude, longitude, err
            )
            return SearchTransportError(stage="forecast", reason=str(err))
        return conditions
