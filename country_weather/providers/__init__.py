from .base import (
    DecodeError,
    NetworkError,
    RequestConfig,
    StatusError,
    WeatherError,
    WeatherProvider,
    WeatherTimeout,
)
from .openmeteo import OpenMeteoProvider, ProviderResponse

__all__ = [
    "DecodeError",
    "NetworkError",
    "OpenMeteoProvider",
    "ProviderResponse",
    "RequestConfig",
    "StatusError",
    "WeatherError",
    "WeatherProvider",
    "WeatherTimeout",
]
