from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude of a representative city, in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherResult:
    """Normalized current conditions for a country.

    Serialized with the camelCase keys consumers of the JSON payload expect:
    ``summary``, ``temperatureC`` and ``feelsLikeC``.
    """

    summary: str
    temperature_c: float
    feels_like_c: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "temperatureC": self.temperature_c,
            "feelsLikeC": self.feels_like_c,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "WeatherResult":
        return cls(
            summary=payload["summary"],
            temperature_c=float(payload["temperatureC"]),
            feels_like_c=float(payload["feelsLikeC"]),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), allow_nan=False)

    @classmethod
    def from_json(cls, raw: str) -> "WeatherResult":
        return cls.from_dict(json.loads(raw))


__all__ = ["Coordinates", "WeatherResult"]
