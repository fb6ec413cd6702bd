from __future__ import annotations

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from country_weather import supported_countries


def test_command_prints_weather_json(requests_mock, openmeteo_url, make_payload) -> None:
    requests_mock.get(openmeteo_url, json=make_payload(temperature=-2.0, apparent=-6.5, code=73))
    out = StringIO()

    call_command("weather_fetch", country="FI", stdout=out)

    assert json.loads(out.getvalue()) == {
        "summary": "Moderate snow",
        "temperatureC": -2.0,
        "feelsLikeC": -6.5,
    }


def test_command_lists_countries() -> None:
    out = StringIO()

    call_command("weather_fetch", list=True, stdout=out)

    assert out.getvalue().split() == supported_countries()


def test_command_requires_country() -> None:
    with pytest.raises(CommandError):
        call_command("weather_fetch")


def test_command_wraps_provider_errors(requests_mock, openmeteo_url) -> None:
    requests_mock.get(openmeteo_url, text="not json")

    with pytest.raises(CommandError):
        call_command("weather_fetch", country="GB")
