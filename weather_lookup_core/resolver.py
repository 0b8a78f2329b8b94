"""Resolve free-text place names to coordinates."""

from __future__ import annotations

import logging

from .domains.weather import Place, SearchNotFound, SearchTransportError
from .errors import WeatherLookupError
from .http import OpenMeteoHttpClient

_LOGGER = logging.getLogger(__name__)


class PlaceResolver:
    """Resolve a place name to its best geocoding match."""

    def __init__(self, client: OpenMeteoHttpClient) -> None:
        self._client = client

    async def resolve(
        self, query: str
    ) -> Place | SearchNotFound | SearchTransportError:
        """Resolve ``query`` to the first geocoding match.

        Args:
            query: Non-empty, already trimmed place name.

        Returns:
            The matched Place, SearchNotFound when the service has no match,
            or SearchTransportError when the lookup failed.

        Raises:
            ValueError: If ``query`` is empty or not trimmed.
        """
        if not query or query != query.strip():
            raise ValueError("query must be a non-empty trimmed string")

        try:
            results = await self._client.search_places(query, count=1)
            if not results:
                _LOGGER.info("No geocoding match for %r", query)
                return SearchNotFound(query=query)
            place = Place.from_geocoding_result(results[0])
        except WeatherLookupError as err:
            _LOGGER.warning("Geocoding %r failed: %s", query, err)
            return SearchTransportError(stage="geocoding", reason=str(err))

        _LOGGER.debug(
            "Resolved %r to %s (%s, %s)",
            query,
            place.display_label,
            place.latitude,
            place.longitude,
        )
        return place
