"""Representative city coordinates for supported countries."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping

from .entities import Coordinates


logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "GB"

COUNTRY_COORDINATES: Mapping[str, Coordinates] = MappingProxyType(
    {
        "GB": Coordinates(51.5074, -0.1278),  # London
        "FR": Coordinates(48.8566, 2.3522),  # Paris
        "DE": Coordinates(52.5200, 13.4050),  # Berlin
        "ES": Coordinates(40.4168, -3.7038),  # Madrid
        "IT": Coordinates(41.9028, 12.4964),  # Rome
        "NL": Coordinates(52.3676, 4.9041),  # Amsterdam
        "BE": Coordinates(50.8503, 4.3517),  # Brussels
        "SE": Coordinates(59.3293, 18.0686),  # Stockholm
        "NO": Coordinates(59.9139, 10.7522),  # Oslo
        "FI": Coordinates(60.1699, 24.9384),  # Helsinki
        "PL": Coordinates(52.2297, 21.0122),  # Warsaw
        "IE": Coordinates(53.3498, -6.2603),  # Dublin
        "PT": Coordinates(38.7223, -9.1393),  # Lisbon
        "AT": Coordinates(48.2082, 16.3738),  # Vienna
        "CH": Coordinates(46.9481, 7.4474),  # Bern
        "DK": Coordinates(55.6761, 12.5683),  # Copenhagen
        "CZ": Coordinates(50.0755, 14.4378),  # Prague
        "GR": Coordinates(37.9838, 23.7275),  # Athens
    }
)


def resolve_coordinates(country_code: str) -> Coordinates:
    """Return coordinates for ``country_code``, falling back to London."""
    coords = COUNTRY_COORDINATES.get(country_code)
    if coords is None:
        logger.info("Unknown country %r, using %s coordinates", country_code, DEFAULT_COUNTRY)
        coords = COUNTRY_COORDINATES[DEFAULT_COUNTRY]
    return coords


def supported_countries() -> List[str]:
    return sorted(COUNTRY_COORDINATES)


__all__ = ["COUNTRY_COORDINATES", "DEFAULT_COUNTRY", "resolve_coordinates", "supported_countries"]
