"""Current weather for a country's representative city, via Open-Meteo."""
from __future__ import annotations

from .codes import UNKNOWN_SUMMARY, describe_weather_code
from .coordinates import DEFAULT_COUNTRY, resolve_coordinates, supported_countries
from .entities import Coordinates, WeatherResult
from .providers.base import (
    DecodeError,
    NetworkError,
    RequestConfig,
    StatusError,
    WeatherError,
    WeatherTimeout,
)
from .services.weather import WeatherService, fetch_weather

__all__ = [
    "Coordinates",
    "DEFAULT_COUNTRY",
    "DecodeError",
    "NetworkError",
    "RequestConfig",
    "StatusError",
    "UNKNOWN_SUMMARY",
    "WeatherError",
    "WeatherResult",
    "WeatherService",
    "WeatherTimeout",
    "describe_weather_code",
    "fetch_weather",
    "resolve_coordinates",
    "supported_countries",
]
