"""View state controller for the weather lookup widget.

This module owns the widget's observable state and runs each search as a
two-stage pipeline: resolve the place, then fetch current conditions.

State transitions:
    IDLE -> LOADING -> SUCCESS | NOT_FOUND | TRANSPORT_ERROR
    any -> LOADING on every accepted submission

Every submission is tagged with an increasing sequence number. A search
only writes its outcome while it is still the latest one, so a slow
earlier search can never overwrite a newer result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

import aiohttp

from .config import WidgetConfig
from .domains.weather import (
    CurrentConditions,
    Place,
    SearchNotFound,
    SearchOutcome,
    SearchSuccess,
    SearchTransportError,
    TemperatureUnit,
)
from .fetcher import WeatherFetcher
from .http import OpenMeteoHttpClient
from .presentation import (
    PLACEHOLDER,
    describe,
    format_humidity,
    format_observed_at,
    format_temperature,
    format_wind,
    icon_url,
)
from .resolver import PlaceResolver

_LOGGER = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "City not found. Try another search."
TRANSPORT_ERROR_MESSAGE = "Unable to load data. Please try again."


class ViewStatus(Enum):
    """Pipeline state as seen by the view."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class ViewState:
    """Snapshot of the widget state.

    A new snapshot replaces the previous one on every transition.
    ``error_message`` and the result fields are never set together.
    """

    query: str = ""
    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    status: ViewStatus = ViewStatus.IDLE
    loading: bool = False
    error_message: str | None = None
    place: Place | None = None
    conditions: CurrentConditions | None = None
    description: str | None = None
    icon_id: str | None = None
    observed_at: datetime | None = None


@dataclass(frozen=True)
class WeatherView:
    """Display strings rendered from a ViewState."""

    city_label: str
    observed_at: str
    description: str
    icon_url: str
    temperature: str
    unit_symbol: str
    humidity: str
    wind: str
    loading: bool
    error_message: str | None


class WeatherViewController:
    """Orchestrates resolver, fetcher and mapper for the widget.

    Usage:
        async with aiohttp.ClientSession() as http_session:
            controller = WeatherViewController.from_session(http_session)
            controller.on_state_changed(redraw)
            await controller.start()
            await controller.submit("Porto")
            controller.toggle_unit()
            view = controller.render()
    """

    def __init__(
        self,
        resolver: PlaceResolver,
        fetcher: WeatherFetcher,
        *,
        config: WidgetConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._resolver = resolver
        self._fetcher = fetcher
        self._config = config or WidgetConfig()
        self._clock = clock or (lambda: datetime.now().astimezone())

        self._state = ViewState()
        self._search_seq = 0
        self._listeners: list[Callable[[ViewState], None]] = []

    @classmethod
    def from_session(
        cls,
        session: aiohttp.ClientSession,
        config: WidgetConfig | None = None,
    ) -> WeatherViewController:
        """Wire up a controller over an existing aiohttp session."""
        config = config or WidgetConfig()
        client = OpenMeteoHttpClient(
            session,
            geocoding_url=config.geocoding_url,
            forecast_url=config.forecast_url,
            language=config.language,
            request_timeout=config.request_timeout,
        )
        return cls(PlaceResolver(client), WeatherFetcher(client), config=config)

    # -------------------------------------------------------------------------
    # Public API: State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        """Current state snapshot."""
        return self._state

    def on_state_changed(
        self, callback: Callable[[ViewState], None]
    ) -> Callable[[], None]:
        """Register a callback invoked with each new state.

        Returns:
            A function that unregisters the callback.
        """
        self._listeners.append(callback)

        def _unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return _unsubscribe

    def set_query(self, text: str) -> None:
        """Update the search box text without searching."""
        self._set_state(replace(self._state, query=text))

    def set_unit(self, unit: TemperatureUnit) -> None:
        """Select the display unit. Never triggers a fetch."""
        self._set_state(replace(self._state, unit=unit))

    def toggle_unit(self) -> TemperatureUnit:
        """Switch between Celsius and Fahrenheit and return the new unit."""
        unit = (
            TemperatureUnit.FAHRENHEIT
            if self._state.unit is TemperatureUnit.CELSIUS
            else TemperatureUnit.CELSIUS
        )
        self.set_unit(unit)
        return unit

    # -------------------------------------------------------------------------
    # Public API: Searching
    # -------------------------------------------------------------------------

    async def start(self) -> SearchOutcome | None:
        """Run the initial search for the configured default city.

        Does nothing when auto_search is off or no default city is set.
        """
        if not self._config.auto_search or not self._config.default_city:
            _LOGGER.debug("Auto search disabled, staying idle")
            return None
        return await self.submit(self._config.default_city)

    async def submit(self, query: str | None = None) -> SearchOutcome | None:
        """Search for ``query`` (or the current search box text).

        Returns:
            The applied outcome, or None when the query was blank or a newer
            search superseded this one.
        """
        text = self._state.query if query is None else query
        trimmed = text.strip()
        if not trimmed:
            return None

        self._search_seq += 1
        seq = self._search_seq
        _LOGGER.info("[%s] Searching for %r", seq, trimmed)

        self._set_state(
            replace(
                self._state,
                query=text,
                status=ViewStatus.LOADING,
                loading=True,
                error_message=None,
                place=None,
                conditions=None,
                description=None,
                icon_id=None,
                observed_at=None,
            )
        )

        resolved = await self._resolver.resolve(trimmed)
        if not self._is_current(seq):
            return None
        if not isinstance(resolved, Place):
            return self._apply(seq, resolved)

        conditions = await self._fetcher.fetch_current(
            resolved.latitude, resolved.longitude
        )
        if not self._is_current(seq):
            return None
        if isinstance(conditions, SearchTransportError):
            return self._apply(seq, conditions)

        return self._apply(seq, SearchSuccess(place=resolved, conditions=conditions))

    # -------------------------------------------------------------------------
    # Public API: Rendering
    # -------------------------------------------------------------------------

    def render(self) -> WeatherView:
        """Render display strings from the current state."""
        state = self._state
        conditions = state.conditions or CurrentConditions()
        return WeatherView(
            city_label=state.place.display_label if state.place else PLACEHOLDER,
            observed_at=format_observed_at(state.observed_at),
            description=state.description or PLACEHOLDER,
            icon_url=icon_url(
                state.icon_id or describe(None)[1], self._config.icon_url_template
            ),
            temperature=format_temperature(conditions.temperature_celsius, state.unit),
            unit_symbol=f"°{state.unit.value}",
            humidity=format_humidity(conditions.relative_humidity_percent),
            wind=format_wind(conditions.wind_speed),
            loading=state.loading,
            error_message=state.error_message,
        )

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _is_current(self, seq: int) -> bool:
        if seq != self._search_seq:
            _LOGGER.debug(
                "[%s] Discarding stale result (latest is %s)", seq, self._search_seq
            )
            return False
        return True

    def _apply(self, seq: int, outcome: SearchOutcome) -> SearchOutcome:
        cleared = replace(
            self._state,
            loading=False,
            place=None,
            conditions=None,
            description=None,
            icon_id=None,
            observed_at=None,
        )
        if isinstance(outcome, SearchSuccess):
            description, icon_id = describe(outcome.conditions.weather_code)
            new_state = replace(
                cleared,
                status=ViewStatus.SUCCESS,
                error_message=None,
                place=outcome.place,
                conditions=outcome.conditions,
                description=description,
                icon_id=icon_id,
                observed_at=self._clock(),
            )
            _LOGGER.info("[%s] Loaded %s", seq, outcome.place.display_label)
        elif isinstance(outcome, SearchNotFound):
            new_state = replace(
                cleared,
                status=ViewStatus.NOT_FOUND,
                error_message=NOT_FOUND_MESSAGE,
            )
            _LOGGER.info("[%s] City not found: %r", seq, outcome.query)
        else:
            new_state = replace(
                cleared,
                status=ViewStatus.TRANSPORT_ERROR,
                error_message=TRANSPORT_ERROR_MESSAGE,
            )
            _LOGGER.warning(
                "[%s] %s stage failed: %s", seq, outcome.stage, outcome.reason
            )
        self._set_state(new_state)
        return outcome

    def _set_state(self, state: ViewState) -> None:
        """Replace the state snapshot and notify listeners."""
        if state == self._state:
            return
        if state.status is not self._state.status:
            _LOGGER.debug("State: %s -> %s", self._state.status.value, state.status.value)
        self._state = state
        for listener in list(self._listeners):
            listener(state)
