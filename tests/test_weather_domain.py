"""Tests for weather lookup domain data structures."""

from __future__ import annotations

import dataclasses

import pytest

from weather_lookup_core.domains.weather import (
    CurrentConditions,
    OutcomeKind,
    Place,
    SearchNotFound,
    SearchSuccess,
    SearchTransportError,
    TemperatureUnit,
    round_half_up,
)
from weather_lookup_core.errors import WeatherLookupParseError


class TestPlace:
    """Tests for Place construction from geocoding results."""

    def test_label_joins_name_region_country(self) -> None:
        place = Place.from_geocoding_result(
            {
                "name": "Lisbon",
                "admin1": "Lisbon",
                "country": "Portugal",
                "latitude": 38.71667,
                "longitude": -9.13333,
            }
        )
        assert place.display_label == "Lisbon, Lisbon, Portugal"
        assert place.latitude == 38.71667
        assert place.longitude == -9.13333

    def test_label_omits_missing_region(self) -> None:
        place = Place.from_geocoding_result(
            {"name": "Monaco", "country": "Monaco", "latitude": 43.7, "longitude": 7.4}
        )
        assert place.display_label == "Monaco, Monaco"

    def test_label_omits_missing_country(self) -> None:
        place = Place.from_geocoding_result(
            {"name": "Atlantis", "admin1": "Sea", "latitude": 0, "longitude": 0}
        )
        assert place.display_label == "Atlantis, Sea"

    def test_label_skips_empty_strings(self) -> None:
        """Empty region or country never produces an empty segment."""
        place = Place.from_geocoding_result(
            {
                "name": "Nowhere",
                "admin1": "",
                "country": "",
                "latitude": 1,
                "longitude": 2,
            }
        )
        assert place.display_label == "Nowhere"

    @pytest.mark.parametrize(
        "result",
        [
            {"name": "X", "longitude": 1.0},
            {"name": "X", "latitude": 1.0},
            {"name": "X", "latitude": "1.0", "longitude": 1.0},
            {"latitude": 1.0, "longitude": 1.0},
            {"name": "X", "latitude": float("nan"), "longitude": 1.0},
            {"name": "X", "latitude": 1.0, "longitude": float("inf")},
        ],
    )
    def test_malformed_result_raises_parse_error(self, result: dict) -> None:
        with pytest.raises(WeatherLookupParseError):
            Place.from_geocoding_result(result)

    def test_place_is_immutable(self) -> None:
        place = Place("Lisbon", 38.7, -9.1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            place.latitude = 0.0  # type: ignore[misc]


class TestCurrentConditions:
    """Tests for CurrentConditions construction from forecast data."""

    def test_all_fields_present(self) -> None:
        conditions = CurrentConditions.from_forecast_current(
            {
                "temperature_2m": 21.4,
                "relative_humidity_2m": 63,
                "wind_speed_10m": 12.3,
                "weather_code": 3,
            }
        )
        assert conditions == CurrentConditions(21.4, 63, 12.3, 3)

    def test_absent_fields_stay_absent(self) -> None:
        """Missing readings are None, never a default like 0."""
        conditions = CurrentConditions.from_forecast_current({})
        assert conditions.temperature_celsius is None
        assert conditions.relative_humidity_percent is None
        assert conditions.wind_speed is None
        assert conditions.weather_code is None

    def test_explicit_nulls_stay_absent(self) -> None:
        conditions = CurrentConditions.from_forecast_current(
            {"temperature_2m": None, "relative_humidity_2m": None}
        )
        assert conditions.temperature_celsius is None
        assert conditions.relative_humidity_percent is None

    @pytest.mark.parametrize(
        ("raw", "expected"), [(63.4, 63), (63.5, 64), (63.6, 64), (0, 0)]
    )
    def test_humidity_rounded_to_integer(self, raw: float, expected: int) -> None:
        conditions = CurrentConditions.from_forecast_current(
            {"relative_humidity_2m": raw}
        )
        assert conditions.relative_humidity_percent == expected
        assert isinstance(conditions.relative_humidity_percent, int)

    def test_temperature_kept_unrounded(self) -> None:
        conditions = CurrentConditions.from_forecast_current({"temperature_2m": 21.6})
        assert conditions.temperature_celsius == 21.6

    def test_non_numeric_value_raises_parse_error(self) -> None:
        with pytest.raises(WeatherLookupParseError):
            CurrentConditions.from_forecast_current({"temperature_2m": "warm"})

    @pytest.mark.parametrize(
        "key",
        ["temperature_2m", "relative_humidity_2m", "wind_speed_10m", "weather_code"],
    )
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_value_raises_parse_error(self, key: str, value: float) -> None:
        """NaN and Infinity are valid JSON for json.loads but not valid readings."""
        with pytest.raises(WeatherLookupParseError):
            CurrentConditions.from_forecast_current({key: value})

    def test_oversized_integer_raises_parse_error(self) -> None:
        with pytest.raises(WeatherLookupParseError):
            CurrentConditions.from_forecast_current({"temperature_2m": 10**400})

    @pytest.mark.parametrize("code", [0.9, 2.5, -0.1])
    def test_fractional_weather_code_raises_parse_error(self, code: float) -> None:
        with pytest.raises(WeatherLookupParseError):
            CurrentConditions.from_forecast_current({"weather_code": code})

    def test_integral_float_weather_code_is_accepted(self) -> None:
        conditions = CurrentConditions.from_forecast_current({"weather_code": 3.0})
        assert conditions.weather_code == 3


class TestSearchOutcome:
    """Tests for the outcome variants."""

    def test_outcome_kinds(self) -> None:
        place = Place("Lisbon", 38.7, -9.1)
        assert SearchSuccess(place, CurrentConditions()).kind is OutcomeKind.SUCCESS
        assert SearchNotFound("x").kind is OutcomeKind.NOT_FOUND
        assert SearchTransportError("forecast").kind is OutcomeKind.TRANSPORT_ERROR

    def test_kind_is_not_a_field(self) -> None:
        names = [f.name for f in dataclasses.fields(SearchNotFound)]
        assert names == ["query"]


class TestHelpers:
    """Tests for unit enum and rounding helper."""

    def test_unit_values(self) -> None:
        assert TemperatureUnit.CELSIUS.value == "C"
        assert TemperatureUnit.FAHRENHEIT.value == "F"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(21.4, 21), (21.5, 22), (21.6, 22), (-0.4, 0), (-0.5, 0), (-1.6, -2)],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected
