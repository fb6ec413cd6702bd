from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .base import DecodeError, WeatherProvider
from ..entities import Coordinates


CURRENT_FIELDS = ("temperature_2m", "apparent_temperature", "weather_code")


class CurrentConditions(BaseModel):
    # Strings and booleans are not coerced; JSON integers are still valid floats.
    temperature_2m: float = Field(strict=True, allow_inf_nan=False)
    apparent_temperature: float = Field(strict=True, allow_inf_nan=False)
    weather_code: int = Field(strict=True)


class ProviderResponse(BaseModel):
    """Subset of the Open-Meteo forecast payload we read; extra keys are ignored."""

    current: CurrentConditions


class OpenMeteoProvider(WeatherProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def current_url(self, coords: Coordinates) -> str:
        return (
            f"{self.base_url}?latitude={coords.latitude:.4f}&longitude={coords.longitude:.4f}"
            f"&current={','.join(CURRENT_FIELDS)}"
        )

    def current(self, coords: Coordinates) -> ProviderResponse:
        response = self._request("GET", self.current_url(coords))
        with response:
            return self._decode(response)

    # helpers ------------------------------------------------------------
    def _decode(self, response) -> ProviderResponse:
        try:
            data = response.json(parse_constant=_reject_constant)
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise DecodeError("invalid json") from exc
        try:
            return ProviderResponse.model_validate(data)
        except ValidationError as exc:
            self._log.error("Unexpected response shape: %s", exc)
            raise DecodeError("unexpected response shape") from exc


def _reject_constant(token: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"non-finite number {token} in JSON body")


__all__ = ["OpenMeteoProvider", "ProviderResponse", "CurrentConditions", "CURRENT_FIELDS"]
