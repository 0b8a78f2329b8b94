"""Weather code lookup and display formatting.

The code table follows the WMO interpretation codes used by Open-Meteo.
Icon ids are OpenWeather icon names so the widget can reuse their assets.
"""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Final

from .domains.weather import TemperatureUnit, WeatherCodeEntry, round_half_up

ICON_URL_TEMPLATE: Final = "https://openweathermap.org/img/wn/{icon_id}@2x.png"

FALLBACK_ENTRY: Final = WeatherCodeEntry("Weather", "01d")

PLACEHOLDER: Final = "—"
TEMPERATURE_PLACEHOLDER: Final = "–"

WEATHER_CODES: Final = MappingProxyType(
    {
        0: WeatherCodeEntry("Clear Sky", "01d"),
        1: WeatherCodeEntry("Mainly Clear", "02d"),
        2: WeatherCodeEntry("Partly Cloudy", "03d"),
        3: WeatherCodeEntry("Overcast", "04d"),
        45: WeatherCodeEntry("Fog", "50d"),
        48: WeatherCodeEntry("Rime Fog", "50d"),
        51: WeatherCodeEntry("Light Drizzle", "09d"),
        53: WeatherCodeEntry("Drizzle", "09d"),
        55: WeatherCodeEntry("Dense Drizzle", "09d"),
        61: WeatherCodeEntry("Light Rain", "10d"),
        63: WeatherCodeEntry("Rain", "10d"),
        65: WeatherCodeEntry("Heavy Rain", "10d"),
        66: WeatherCodeEntry("Freezing Rain", "10d"),
        67: WeatherCodeEntry("Freezing Rain", "10d"),
        71: WeatherCodeEntry("Light Snow", "13d"),
        73: WeatherCodeEntry("Snow", "13d"),
        75: WeatherCodeEntry("Heavy Snow", "13d"),
        77: WeatherCodeEntry("Snow Grains", "13d"),
        80: WeatherCodeEntry("Light Showers", "09d"),
        81: WeatherCodeEntry("Showers", "09d"),
        82: WeatherCodeEntry("Heavy Showers", "09d"),
        85: WeatherCodeEntry("Snow Showers", "13d"),
        86: WeatherCodeEntry("Snow Showers", "13d"),
        95: WeatherCodeEntry("Thunderstorm", "11d"),
        96: WeatherCodeEntry("Thunderstorm with Hail", "11d"),
        99: WeatherCodeEntry("Thunderstorm with Hail", "11d"),
    }
)


def describe(code: int | None) -> tuple[str, str]:
    """Map a weather code to ``(description, icon_id)``.

    Unknown or missing codes map to ``("Weather", "01d")``.
    """
    if code is None:
        entry = FALLBACK_ENTRY
    else:
        entry = WEATHER_CODES.get(code, FALLBACK_ENTRY)
    return entry.description, entry.icon_id


def icon_url(icon_id: str, template: str = ICON_URL_TEMPLATE) -> str:
    """Build the icon asset URL for an icon id."""
    return template.format(icon_id=icon_id)


def celsius_to_fahrenheit(celsius: float) -> int:
    """Convert and round half-up, e.g. 20.0 -> 68."""
    return round_half_up(celsius * 9 / 5 + 32)


def format_temperature(celsius: float | None, unit: TemperatureUnit) -> str:
    """Format a stored Celsius reading in the selected unit, without the unit sign."""
    if celsius is None:
        return TEMPERATURE_PLACEHOLDER
    if unit is TemperatureUnit.FAHRENHEIT:
        return str(celsius_to_fahrenheit(celsius))
    return str(round_half_up(celsius))


def format_humidity(percent: int | None) -> str:
    value = PLACEHOLDER if percent is None else str(percent)
    return f"{value}%"


def format_wind(speed_kmh: float | None) -> str:
    # Open-Meteo reports wind_speed_10m in km/h unless asked otherwise.
    value = PLACEHOLDER if speed_kmh is None else f"{speed_kmh:.1f}"
    return f"{value} km/h"


def format_observed_at(observed_at: datetime | None) -> str:
    """Format the local lookup time as weekday plus HH:MM, e.g. "Monday 14:05"."""
    if observed_at is None:
        return PLACEHOLDER
    return observed_at.strftime("%A %H:%M")
