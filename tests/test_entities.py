from __future__ import annotations

import json

import pytest

from country_weather.entities import WeatherResult


def test_weather_result_json_keys():
    result = WeatherResult(summary="Clear sky", temperature_c=25.5, feels_like_c=24.0)

    assert json.loads(result.to_json()) == {
        "summary": "Clear sky",
        "temperatureC": 25.5,
        "feelsLikeC": 24.0,
    }


@pytest.mark.parametrize(
    "result",
    [
        WeatherResult(summary="Clear sky", temperature_c=25.5, feels_like_c=24.0),
        WeatherResult(summary="Unknown", temperature_c=-12.3, feels_like_c=-19.75),
    ],
)
def test_weather_result_round_trip(result):
    assert WeatherResult.from_json(result.to_json()) == result


def test_weather_result_from_dict_accepts_integers():
    result = WeatherResult.from_dict({"summary": "Overcast", "temperatureC": 7, "feelsLikeC": 5})

    assert result.temperature_c == 7.0
    assert isinstance(result.feels_like_c, float)


def test_weather_result_never_writes_non_finite_json():
    result = WeatherResult(summary="Clear sky", temperature_c=float("nan"), feels_like_c=float("inf"))

    with pytest.raises(ValueError):
        result.to_json()
