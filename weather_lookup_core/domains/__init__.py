"""Domain-specific data structures for weather lookups."""

from .weather import (
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

__all__ = [
    "CurrentConditions",
    "OutcomeKind",
    "Place",
    "SearchNotFound",
    "SearchOutcome",
    "SearchSuccess",
    "SearchTransportError",
    "TemperatureUnit",
    "WeatherCodeEntry",
]
