"""
This module defines how a place is addressed to a weather provider.
"""

from dataclasses import dataclass
from enum import Enum

from weatherapi.exceptions import InvalidLocationException


class LocationSource(Enum):
    """Addressing schemes a location string may be written in."""

    CITY_STATE = "city_state"
    LATITUDE_LONGITUDE = "latitude_longitude"
    AIRPORT_CODE = "airport_code"
    ZIP_CODE = "zip_code"


@dataclass(frozen=True)
class CityState:
    """A "City, State" location split into its parts."""

    city: str
    state: str

    @classmethod
    def parse(cls, location: str) -> "CityState":
        """
        Split a location on its first comma.

        Raises InvalidLocationException when there is no comma or either
        part is blank.
        """
        city, comma, state = location.partition(",")
        if not comma:
            raise InvalidLocationException(
                f"Expected 'City, State' location, got {location!r}"
            )
        city, state = city.strip(), state.strip()
        if not city or not state:
            raise InvalidLocationException(
                f"Location {location!r} is missing a city or state"
            )
        return cls(city=city, state=state)

    def city_key(self, separator: str = " ") -> str:
        return self.city.replace(" ", separator)


def format_location(
    location: str,
    source: LocationSource,
    template: str = "{city},{state}",
    separator: str = " ",
) -> str:
    """
    Render a location for an outbound request.

    CITY_STATE locations are rendered through ``template`` with ``city`` and
    ``state`` placeholders, spaces in the city replaced by ``separator``.
    Every other source is passed through verbatim.
    """
    if source is LocationSource.CITY_STATE:
        parsed = CityState.parse(location)
        return template.format(city=parsed.city_key(separator), state=parsed.state)
    return location
