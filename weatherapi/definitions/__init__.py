"""Canonical weather vocabulary shared by all providers."""

from .conditions import BASE_PHENOMENA, QUALIFIERS, WeatherCondition, canonicalize
from .directions import Direction
from .locations import CityState, LocationSource, format_location

__all__ = [
    "BASE_PHENOMENA",
    "QUALIFIERS",
    "WeatherCondition",
    "canonicalize",
    "Direction",
    "CityState",
    "LocationSource",
    "format_location",
]
