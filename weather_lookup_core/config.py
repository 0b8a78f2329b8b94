"""Widget configuration loading.

Configuration is plain YAML. Every key is optional; unknown keys are
ignored so one file can carry settings for other components.

Example:
    default_city: Lisbon
    auto_search: true
    request_timeout: 10
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .http import FORECAST_URL, GEOCODING_URL
from .presentation import ICON_URL_TEMPLATE


class ConfigLoadError(Exception):
    """Error loading or validating widget configuration."""


@dataclass(frozen=True)
class WidgetConfig:
    """Settings for the weather lookup widget.

    Attributes:
        geocoding_url: Geocoding search endpoint.
        forecast_url: Forecast endpoint.
        icon_url_template: Icon asset URL with an ``{icon_id}`` placeholder.
        language: Language for geocoding labels.
        default_city: City searched by ``start()`` when auto_search is on.
        auto_search: Whether ``start()`` runs an initial search.
        request_timeout: Total per-request timeout in seconds, None for none.
    """

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    icon_url_template: str = ICON_URL_TEMPLATE
    language: str = "en"
    default_city: str = "Lisbon"
    auto_search: bool = True
    request_timeout: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WidgetConfig:
        """Build a config from a mapping, validating known keys."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}

        for key in ("geocoding_url", "forecast_url", "icon_url_template", "language"):
            if key in values and not (
                isinstance(values[key], str) and values[key].strip()
            ):
                raise ConfigLoadError(f"{key} must be a non-empty string")

        if "default_city" in values:
            city = values["default_city"]
            if not isinstance(city, str):
                raise ConfigLoadError("default_city must be a string")
            values["default_city"] = city.strip()

        if "icon_url_template" in values and "{icon_id}" not in values[
            "icon_url_template"
        ]:
            raise ConfigLoadError("icon_url_template must contain {icon_id}")

        if "auto_search" in values and not isinstance(values["auto_search"], bool):
            raise ConfigLoadError("auto_search must be true or false")

        if (timeout := values.get("request_timeout")) is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise ConfigLoadError("request_timeout must be a number")
            if timeout <= 0:
                raise ConfigLoadError("request_timeout must be positive")
            values["request_timeout"] = float(timeout)

        return cls(**values)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file with error handling."""
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}")
    with path.open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as err:
            raise ConfigLoadError(f"Invalid YAML in {path}: {err}") from err
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping at top level of {path}")
    return data


def load_config(path: Path | None = None) -> WidgetConfig:
    """Load widget configuration.

    Args:
        path: YAML file to read. Defaults apply when omitted.

    Returns:
        Parsed WidgetConfig.

    Raises:
        ConfigLoadError: If the file is missing or holds invalid values.
    """
    if path is None:
        return WidgetConfig()
    return WidgetConfig.from_dict(_load_yaml(path))
