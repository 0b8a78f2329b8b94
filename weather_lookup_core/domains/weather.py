"""Weather lookup domain data structures.

Places and current conditions are immutable snapshots. Each search
produces exactly one ``SearchOutcome``; nothing is merged across searches.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from ..errors import WeatherLookupParseError


class TemperatureUnit(Enum):
    """Display unit for temperatures."""

    CELSIUS = "C"
    FAHRENHEIT = "F"


class OutcomeKind(Enum):
    """Tag for the variants of a search outcome."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class Place:
    """A resolved place.

    Attributes:
        display_label: "Name, Region, Country" with absent parts omitted.
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
    """

    display_label: str
    latitude: float
    longitude: float

    @classmethod
    def from_geocoding_result(cls, result: dict[str, Any]) -> Place:
        """Create a Place from one Open-Meteo geocoding result.

        Raises:
            WeatherLookupParseError: If name or coordinates are missing.
        """
        name = result.get("name")
        if not name:
            raise WeatherLookupParseError("Geocoding result has no name")
        parts = [str(name)]
        for key in ("admin1", "country"):
            if value := result.get(key):
                parts.append(str(value))
        return cls(
            display_label=", ".join(parts),
            latitude=_require_number(result, "latitude"),
            longitude=_require_number(result, "longitude"),
        )


@dataclass(frozen=True)
class CurrentConditions:
    """Current-conditions reading. ``None`` marks a field the service omitted."""

    temperature_celsius: float | None = None
    relative_humidity_percent: int | None = None
    wind_speed: float | None = None
    weather_code: int | None = None

    @classmethod
    def from_forecast_current(cls, current: dict[str, Any]) -> CurrentConditions:
        """Create CurrentConditions from the forecast ``current`` object."""
        humidity = _optional_number(current, "relative_humidity_2m")
        code = _optional_number(current, "weather_code")
        return cls(
            temperature_celsius=_optional_number(current, "temperature_2m"),
            relative_humidity_percent=(
                round_half_up(humidity) if humidity is not None else None
            ),
            wind_speed=_optional_number(current, "wind_speed_10m"),
            weather_code=_optional_code(code),
        )


@dataclass(frozen=True)
class WeatherCodeEntry:
    """Human-readable description and icon id for one weather code."""

    description: str
    icon_id: str


@dataclass(frozen=True)
class SearchSuccess:
    """Both pipeline stages succeeded."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS

    place: Place
    conditions: CurrentConditions


@dataclass(frozen=True)
class SearchNotFound:
    """The geocoding service returned zero matches."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.NOT_FOUND

    query: str


@dataclass(frozen=True)
class SearchTransportError:
    """A network, HTTP status or parse failure at either stage.

    Attributes:
        stage: "geocoding" or "forecast".
        reason: Diagnostic text from the underlying error.
    """

    kind: ClassVar[OutcomeKind] = OutcomeKind.TRANSPORT_ERROR

    stage: str
    reason: str = ""


SearchOutcome = SearchSuccess | SearchNotFound | SearchTransportError


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (21.5 -> 22, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def _finite_float(value: Any) -> float | None:
    """Return ``value`` as a finite float, or None for NaN, infinities and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _require_number(data: dict[str, Any], key: str) -> float:
    number = _finite_float(data.get(key))
    if number is None:
        raise WeatherLookupParseError(f"Missing or non-numeric {key}")
    return number


def _optional_number(data: dict[str, Any], key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    number = _finite_float(value)
    if number is None:
        raise WeatherLookupParseError(f"Non-numeric {key}: {value!r}")
    return number


def _optional_code(code: float | None) -> int | None:
    if code is None:
        return None
    if not code.is_integer():
        raise WeatherLookupParseError(f"Non-integral weather_code: {code!r}")
    return int(code)
