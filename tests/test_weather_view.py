from __future__ import annotations

import requests
from django.test import Client


def test_weather_endpoint_returns_payload(requests_mock, openmeteo_url, make_payload) -> None:
    requests_mock.get(openmeteo_url, json=make_payload(temperature=25.5, apparent=24.0, code=0))
    client = Client()

    response = client.get("/api/weather", {"country": "ES"})

    assert response.status_code == 200
    assert response.json() == {"summary": "Clear sky", "temperatureC": 25.5, "feelsLikeC": 24.0}
    assert "latitude=40.4168" in requests_mock.last_request.url


def test_weather_endpoint_requires_country() -> None:
    client = Client()
    response = client.get("/api/weather")

    assert response.status_code == 400
    assert "detail" in response.json()


def test_weather_endpoint_reports_provider_status(requests_mock, openmeteo_url) -> None:
    requests_mock.get(openmeteo_url, status_code=500, text="server error")
    client = Client()

    response = client.get("/api/weather", {"country": "GB"})

    assert response.status_code == 502
    assert "HTTP 500" in response.json()["detail"]


def test_weather_endpoint_reports_timeout(requests_mock, openmeteo_url) -> None:
    requests_mock.get(openmeteo_url, exc=requests.exceptions.ReadTimeout)
    client = Client()

    response = client.get("/api/weather", {"country": "GB"})

    assert response.status_code == 504


def test_weather_endpoint_rejects_non_finite_provider_values(requests_mock, openmeteo_url) -> None:
    requests_mock.get(
        openmeteo_url,
        text='{"current": {"temperature_2m": NaN, "apparent_temperature": Infinity, "weather_code": 0}}',
    )
    client = Client()

    response = client.get("/api/weather", {"country": "GB"})

    assert response.status_code == 502
    assert "detail" in response.json()
