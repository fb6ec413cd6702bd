"""REST API views for country weather."""
from __future__ import annotations

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from country_weather import RequestConfig, WeatherError, WeatherResult, WeatherTimeout, fetch_weather


logger = logging.getLogger(__name__)


def fetch_country_weather(country: str) -> WeatherResult:
    """Fetch weather using the provider settings of this deployment."""
    return fetch_weather(
        country,
        config=RequestConfig(timeout=settings.WEATHER_TIMEOUT),
        base_url=settings.WEATHER_API_URL,
    )


class WeatherView(APIView):
    """Provide current weather for the representative city of a country."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the weather summary for ``?country=XX``."""
        country = request.query_params.get("country", "").strip()
        if not country:
            return Response({"detail": "country query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = fetch_country_weather(country)
        except WeatherTimeout as exc:
            logger.warning("Weather provider timed out for %s: %s", country, exc)
            return Response({"detail": "weather provider timed out"}, status=status.HTTP_504_GATEWAY_TIMEOUT)
        except WeatherError as exc:
            logger.warning("Weather provider failed for %s: %s", country, exc)
            return Response({"detail": f"weather provider failed: {exc}"}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(result.to_dict(), status=status.HTTP_200_OK)
