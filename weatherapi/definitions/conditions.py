"""
This module defines the canonical weather condition flags.

Providers report conditions in their own vocabulary. Every translator maps that
vocabulary onto WeatherCondition, a set of combinable flags: a base phenomenon
(rain, snow, fog, ...) optionally refined by qualifiers (light, patchy, freezing, ...).
"""

from enum import IntFlag
from typing import Optional


class WeatherCondition(IntFlag):
    """Combinable weather condition flags. CLEAR is the empty set."""

    CLEAR = 0
    CLOUDY = 1 << 0
    PARTLY_CLOUDY = 1 << 1
    OVERCAST = 1 << 2
    FOG = 1 << 3
    MIST = 1 << 4
    DRIZZLE = 1 << 5
    RAIN = 1 << 6
    SNOW = 1 << 7
    SLEET = 1 << 8
    ICE = 1 << 9
    PELLETS = 1 << 10
    THUNDER = 1 << 11
    SHOWERS = 1 << 12
    BLIZZARD = 1 << 13
    BLOWING = 1 << 14
    LIGHT = 1 << 15
    MODERATE = 1 << 16
    HEAVY = 1 << 17
    TORRENTIAL = 1 << 18
    PATCHY = 1 << 19
    FREEZING = 1 << 20

    @classmethod
    def from_name(cls, token: str) -> Optional["WeatherCondition"]:
        """
        Resolve a single word to a flag, ignoring case and underscores.

        Returns None when the word names no flag.
        """
        return _NAME_LOOKUP.get(token.strip().lower().replace("_", ""))

    @property
    def is_qualifier_only(self) -> bool:
        """True when the value is non-empty but carries no base phenomenon."""
        return bool(self) and not self & BASE_PHENOMENA

    def canonical(self) -> "WeatherCondition":
        """Return CLEAR for a qualifier-only value, otherwise the value itself."""
        if not self & BASE_PHENOMENA:
            return WeatherCondition.CLEAR
        return self


QUALIFIERS = (
    WeatherCondition.LIGHT
    | WeatherCondition.MODERATE
    | WeatherCondition.HEAVY
    | WeatherCondition.TORRENTIAL
    | WeatherCondition.PATCHY
    | WeatherCondition.FREEZING
    | WeatherCondition.BLIZZARD
    | WeatherCondition.BLOWING
)

BASE_PHENOMENA = (
    WeatherCondition.CLOUDY
    | WeatherCondition.PARTLY_CLOUDY
    | WeatherCondition.OVERCAST
    | WeatherCondition.FOG
    | WeatherCondition.MIST
    | WeatherCondition.DRIZZLE
    | WeatherCondition.RAIN
    | WeatherCondition.SNOW
    | WeatherCondition.SLEET
    | WeatherCondition.ICE
    | WeatherCondition.PELLETS
    | WeatherCondition.THUNDER
    | WeatherCondition.SHOWERS
)

_NAME_LOOKUP = {
    member.name.lower().replace("_", ""): member
    for member in WeatherCondition.__members__.values()
}


def canonicalize(condition: WeatherCondition) -> WeatherCondition:
    """Collapse a qualifier-only union to CLEAR."""
    return WeatherCondition(condition).canonical()
