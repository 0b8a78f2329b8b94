"""HTTP client for the Open-Meteo geocoding and forecast endpoints."""

from __future__ import annotations

from typing import Any, Final

import aiohttp

from .errors import (
    WeatherLookupConnectionError,
    WeatherLookupParseError,
    WeatherLookupResponseError,
    WeatherLookupTimeout,
)

GEOCODING_URL: Final = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL: Final = "https://api.open-meteo.com/v1/forecast"

CURRENT_FIELDS: Final = (
    "temperature_2m",
    "relative_humidity_2m",
    "wind_speed_10m",
    "weather_code",
)


class OpenMeteoHttpClient:
    """HTTP client wrapper for the Open-Meteo endpoints.

    The aiohttp session is owned by the caller. Every public method issues
    exactly one request and never retries.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        geocoding_url: str = GEOCODING_URL,
        forecast_url: str = FORECAST_URL,
        language: str = "en",
        request_timeout: float | None = None,
    ) -> None:
        self._session = session
        self._geocoding_url = geocoding_url
        self._forecast_url = forecast_url
        self._language = language
        self._request_timeout = request_timeout

    async def search_places(self, name: str, *, count: int = 1) -> list[dict[str, Any]]:
        """Look up places matching ``name`` on the geocoding endpoint.

        Args:
            name: Free-text place name. Encoded by aiohttp.
            count: Maximum number of matches to request.

        Returns:
            Raw result objects in provider order. Empty when nothing matched.

        Raises:
            WeatherLookupTimeout: If the request times out.
            WeatherLookupConnectionError: If the network request fails.
            WeatherLookupResponseError: If the service answers non-2xx.
            WeatherLookupParseError: If the body is not a geocoding payload.
        """
        params = {
            "name": name,
            "count": str(count),
            "language": self._language,
            "format": "json",
        }
        data = await self._get_json(self._geocoding_url, params, "Geocoding")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise WeatherLookupParseError("Geocoding results is not a list")
        return [item for item in results if isinstance(item, dict)]

    async def fetch_current(self, latitude: float, longitude: float) -> dict[str, Any]:
        """Fetch current conditions for a coordinate pair.

        Returns:
            The raw ``current`` object, empty if the service omitted it.
        """
        params = {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "current": ",".join(CURRENT_FIELDS),
            "timezone": "auto",
        }
        data = await self._get_json(self._forecast_url, params, "Forecast")
        current = data.get("current") or {}
        if not isinstance(current, dict):
            raise WeatherLookupParseError("Forecast current block is not an object")
        return current

    async def _get_json(
        self, url: str, params: dict[str, str], label: str
    ) -> dict[str, Any]:
        try:
            async with self._session.get(
                url,
                params=params,
                timeout=aiohttp.ClientTimeout(total=self._request_timeout),
            ) as resp:
                if not 200 <= resp.status < 300:
                    raise WeatherLookupResponseError(
                        resp.status, f"{label} request failed with HTTP {resp.status}"
                    )
                data = await resp.json()
        except aiohttp.ContentTypeError as err:
            raise WeatherLookupParseError(f"{label} response is not JSON") from err
        except ValueError as err:
            raise WeatherLookupParseError(f"{label} response is not valid JSON") from err
        except TimeoutError as err:
            raise WeatherLookupTimeout(f"{label} request timed out") from err
        except aiohttp.ClientError as err:
            raise WeatherLookupConnectionError(f"{label} request failed") from err

        if not isinstance(data, dict):
            raise WeatherLookupParseError(f"{label} response is not a JSON object")
        return data
