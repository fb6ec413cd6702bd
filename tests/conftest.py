from __future__ import annotations

import pytest

from country_weather.providers.openmeteo import OpenMeteoProvider


@pytest.fixture
def openmeteo_url() -> str:
    return OpenMeteoProvider.base_url


@pytest.fixture
def make_payload():
    def _make(temperature: float = 25.5, apparent: float = 24.0, code: int = 0) -> dict:
        return {
            "latitude": 51.5,
            "longitude": -0.12,
            "current_units": {"temperature_2m": "°C"},
            "current": {
                "time": "2024-05-01T12:00",
                "interval": 900,
                "temperature_2m": temperature,
                "apparent_temperature": apparent,
                "weather_code": code,
            },
        }

    return _make
