"""
Provider-agnostic current weather conditions.

Typical use::

    from weatherapi import LocationSource, build_providers, select_provider

    provider = select_provider(build_providers(), LocationSource.CITY_STATE)
    provider.set_location("Seattle, WA", LocationSource.CITY_STATE)
    provider.update()
    print(provider.degrees_celsius, provider.conditions)
"""

from weatherapi.exceptions import (
    WeatherAPIException,
    ProviderUnavailableException,
    UnsupportedLocationSourceException,
    InvalidLocationException,
    DataUnavailableException,
    MalformedUpstreamDataException,
    ExternalAPIException,
)
from weatherapi.definitions import (
    CityState,
    Direction,
    LocationSource,
    WeatherCondition,
    canonicalize,
)
from weatherapi.models import WeatherSnapshot
from weatherapi.providers import (
    BaseWeatherProvider,
    WeatherReport,
    WorldWeatherOnlineProvider,
    WundergroundProvider,
)
from weatherapi.services.registry import build_providers, get_provider, select_provider

__all__ = [
    "WeatherAPIException",
    "ProviderUnavailableException",
    "UnsupportedLocationSourceException",
    "InvalidLocationException",
    "DataUnavailableException",
    "MalformedUpstreamDataException",
    "ExternalAPIException",
    "CityState",
    "Direction",
    "LocationSource",
    "WeatherCondition",
    "canonicalize",
    "WeatherSnapshot",
    "BaseWeatherProvider",
    "WeatherReport",
    "WorldWeatherOnlineProvider",
    "WundergroundProvider",
    "build_providers",
    "get_provider",
    "select_provider",
]
