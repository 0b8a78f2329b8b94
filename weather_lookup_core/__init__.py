"""Core pipeline for the weather lookup widget.

Resolves a city name with the Open-Meteo geocoding API, fetches current
conditions from the forecast API and keeps the widget's view state.
"""

__version__ = "0.1.0"

from .config import ConfigLoadError, WidgetConfig, load_config
from .controller import (
    NOT_FOUND_MESSAGE,
    TRANSPORT_ERROR_MESSAGE,
    ViewState,
    ViewStatus,
    WeatherView,
    WeatherViewController,
)
from .domains import (
    CurrentConditions,
    OutcomeKind,
    Place,
    SearchNotFound,
    SearchOutcome,
    SearchSuccess,
    SearchTransportError,
    TemperatureUnit,
    WeatherCodeEntry,
)
from .errors import (
    WeatherLookupConnectionError,
    WeatherLookupError,
    WeatherLookupParseError,
    WeatherLookupResponseError,
    WeatherLookupTimeout,
)
from .fetcher import WeatherFetcher
from .http import OpenMeteoHttpClient
from .presentation import WEATHER_CODES, describe
from .resolver import PlaceResolver

__all__ = [
    "NOT_FOUND_MESSAGE",
    "TRANSPORT_ERROR_MESSAGE",
    "WEATHER_CODES",
    "ConfigLoadError",
    "CurrentConditions",
    "OpenMeteoHttpClient",
    "OutcomeKind",
    "Place",
    "PlaceResolver",
    "SearchNotFound",
    "SearchOutcome",
    "SearchSuccess",
    "SearchTransportError",
    "TemperatureUnit",
    "ViewState",
    "ViewStatus",
    "WeatherCodeEntry",
    "WeatherFetcher",
    "WeatherLookupConnectionError",
    "WeatherLookupError",
    "WeatherLookupParseError",
    "WeatherLookupResponseError",
    "WeatherLookupTimeout",
    "WeatherView",
    "WeatherViewController",
    "__version__",
    "describe",
    "load_config",
]
