from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Optional

import requests

from ..codes import describe_weather_code
from ..coordinates import resolve_coordinates
from ..entities import WeatherResult
from ..providers.base import RequestConfig
from ..providers.openmeteo import OpenMeteoProvider


class WeatherService:
    def __init__(
        self,
        provider: OpenMeteoProvider,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def fetch_weather(self, country_code: str) -> WeatherResult:
        """Return current conditions at the representative city of ``country_code``.

        Provider failures propagate as :class:`~country_weather.providers.base.WeatherError`
        subclasses. Unknown countries and unknown weather codes use fallbacks instead.
        """
        coords = resolve_coordinates(country_code)
        current = self.provider.current(coords).current
        summary = describe_weather_code(current.weather_code)
        self._log.debug("Weather for %s: code=%s summary=%s", country_code, current.weather_code, summary)
        return WeatherResult(
            summary=summary,
            temperature_c=current.temperature_2m,
            feels_like_c=current.apparent_temperature,
        )


def fetch_weather(
    country_code: str,
    *,
    session: Optional[requests.Session] = None,
    config: Optional[RequestConfig] = None,
    base_url: Optional[str] = None,
) -> WeatherResult:
    """Fetch current weather for ``country_code`` with a single provider request."""
    # A caller-supplied session stays open; our own is closed on every exit path.
    with (nullcontext(session) if session is not None else requests.Session()) as active:
        provider = OpenMeteoProvider(base_url=base_url, session=active, request_config=config)
        return WeatherService(provider).fetch_weather(country_code)


__all__ = ["WeatherService", "fetch_weather"]
