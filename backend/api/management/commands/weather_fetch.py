"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import fetch_country_weather
from country_weather import WeatherError, supported_countries


class Command(BaseCommand):
    help = "Fetch current weather for a country's representative city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--country", type=str, help="Two-letter country code, e.g. FR")
        parser.add_argument("--list", action="store_true", help="List supported country codes")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        if options.get("list"):
            for code in supported_countries():
                self.stdout.write(code)
            return

        country = options.get("country")
        if not country:
            raise CommandError("--country is required unless using --list")
        try:
            result = fetch_country_weather(country)
        except WeatherError as exc:
            raise CommandError(f"Weather provider failed: {exc}") from exc

        self.stdout.write(result.to_json())
