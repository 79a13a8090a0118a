"""
Weather providers package initialization.
"""

from weatherapi.providers.contract import WeatherReport
from weatherapi.providers.base import BaseWeatherProvider
from weatherapi.providers.wunderground import WundergroundProvider
from weatherapi.providers.world_weather_online import (
    WorldWeatherOnlineProvider,
    WWOWeatherCode,
)

__all__ = [
    "WeatherReport",
    "BaseWeatherProvider",
    "WundergroundProvider",
    "WorldWeatherOnlineProvider",
    "WWOWeatherCode",
]
