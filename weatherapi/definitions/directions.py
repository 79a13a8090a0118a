"""
This module defines compass directions reported for wind.
"""

from enum import Enum
from typing import Dict


class Direction(str, Enum):
    """The 16 points of the compass."""

    N = "N"
    NNE = "NNE"
    NE = "NE"
    ENE = "ENE"
    E = "E"
    ESE = "ESE"
    SE = "SE"
    SSE = "SSE"
    S = "S"
    SSW = "SSW"
    SW = "SW"
    WSW = "WSW"
    W = "W"
    WNW = "WNW"
    NW = "NW"
    NNW = "NNW"

    @classmethod
    def parse(cls, value: str) -> "Direction":
        """
        Parse a provider direction string.

        Accepts the abbreviations in any case and the spelled-out cardinal
        points. Raises ValueError for anything else.
        """
        key = value.strip().upper()
        if key in CARDINAL_WORDS:
            return CARDINAL_WORDS[key]
        return cls(key)


CARDINAL_WORDS: Dict[str, Direction] = {
    "NORTH": Direction.N,
    "EAST": Direction.E,
    "SOUTH": Direction.S,
    "WEST": Direction.W,
}
