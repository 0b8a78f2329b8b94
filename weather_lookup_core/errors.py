"""Client error types for Open-Meteo lookups."""

from __future__ import annotations


class WeatherLookupError(Exception):
    """Base error for weather lookup client failures."""


class WeatherLookupTimeout(WeatherLookupError):
    """Timeout while communicating with the weather service."""


class WeatherLookupConnectionError(WeatherLookupError):
    """Network connection to the weather service failed."""


class WeatherLookupResponseError(WeatherLookupError):
    """HTTP response error from the weather service."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class WeatherLookupParseError(WeatherLookupError):
    """Response body did not have the expected shape."""
