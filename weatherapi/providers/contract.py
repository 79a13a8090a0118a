from abc import ABC, abstractmethod

from weatherapi.definitions.conditions import WeatherCondition
from weatherapi.definitions.directions import Direction


class WeatherReport(ABC):
    """
    Read-only view of the weather at the time of the last refresh.

    Every property is derived from the provider's current document on each
    access. Reading before a refresh raises DataUnavailableException; a missing
    or unparseable upstream field raises MalformedUpstreamDataException.
    """

    @property
    @abstractmethod
    def degrees_celsius(self) -> float:
        """Temperature in degrees Celsius."""

    @property
    @abstractmethod
    def degrees_fahrenheit(self) -> float:
        """Temperature in degrees Fahrenheit."""

    @property
    @abstractmethod
    def wind_speed_mph(self) -> float:
        """Wind speed in miles per hour."""

    @property
    @abstractmethod
    def wind_speed_kph(self) -> float:
        """Wind speed in kilometers per hour."""

    @property
    @abstractmethod
    def wind_direction(self) -> Direction:
        """Direction the wind blows from."""

    @property
    @abstractmethod
    def cloud_cover(self) -> float:
        """Cloud cover as a fraction: 0.0 is clear sky, 1.0 is overcast."""

    @property
    @abstractmethod
    def precipitation(self) -> float:
        """Precipitation in millimeters."""

    @property
    @abstractmethod
    def humidity(self) -> float:
        """Relative humidity as a fraction between 0.0 and 1.0."""

    @property
    @abstractmethod
    def conditions(self) -> WeatherCondition:
        """Canonical weather condition flags."""
