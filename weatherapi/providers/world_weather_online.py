"""
World Weather Online provider.

WWO reports conditions as a numeric weather code from a fixed table, which is
mapped one-to-one onto condition flags.
"""

from enum import IntEnum
from typing import Any, Dict, Tuple, Union

from weatherapi.definitions.conditions import WeatherCondition
from weatherapi.definitions.directions import Direction
from weatherapi.definitions.locations import LocationSource, format_location
from weatherapi.exceptions import MalformedUpstreamDataException
from weatherapi.providers.base import BaseWeatherProvider
from weatherapi.utils.logger import setup_logger

logger = setup_logger(__name__)

API_KEY_SETTING = "WWO_API_KEY"
RESPONSE_FORMAT = "xml"


class WWOWeatherCode(IntEnum):
    """World Weather Online weather codes."""

    CLEAR_SUNNY = 113
    PARTLY_CLOUDY = 116
    CLOUDY = 119
    OVERCAST = 122
    MIST = 143
    PATCHY_RAIN_NEARBY = 176
    PATCHY_SNOW_NEARBY = 179
    PATCHY_SLEET_NEARBY = 182
    PATCHY_FREEZING_DRIZZLE_NEARBY = 185
    THUNDERY_OUTBREAKS_NEARBY = 200
    BLOWING_SNOW = 227
    BLIZZARD = 230
    FOG = 248
    FREEZING_FOG = 260
    PATCHY_LIGHT_DRIZZLE = 263
    LIGHT_DRIZZLE = 266
    FREEZING_DRIZZLE = 281
    HEAVY_FREEZING_DRIZZLE = 284
    PATCHY_LIGHT_RAIN = 293
    LIGHT_RAIN = 296
    PATCHY_MODERATE_RAIN = 299
    MODERATE_RAIN = 302
    PATCHY_HEAVY_RAIN = 305
    HEAVY_RAIN = 308
    LIGHT_FREEZING_RAIN = 311
    MODERATE_OR_HEAVY_FREEZING_RAIN = 314
    LIGHT_SLEET = 317
    MODERATE_OR_HEAVY_SLEET = 320
    PATCHY_LIGHT_SNOW = 323
    LIGHT_SNOW = 326
    PATCHY_MODERATE_SNOW = 329
    MODERATE_SNOW = 332
    PATCHY_HEAVY_SNOW = 335
    HEAVY_SNOW = 338
    ICE_PELLETS = 350
    LIGHT_RAIN_SHOWER = 353
    MODERATE_OR_HEAVY_RAIN_SHOWER = 356
    TORRENTIAL_RAIN_SHOWER = 359
    LIGHT_SLEET_SHOWERS = 362
    MODERATE_OR_HEAVY_SLEET_SHOWERS = 365
    LIGHT_SNOW_SHOWERS = 368
    MODERATE_OR_HEAVY_SNOW_SHOWERS = 371
    LIGHT_ICE_PELLETS = 374
    MODERATE_OR_HEAVY_ICE_PELLETS = 377
    PATCHY_LIGHT_RAIN_WITH_THUNDER = 386
    MODERATE_OR_HEAVY_RAIN_WITH_THUNDER = 389
    PATCHY_LIGHT_SNOW_WITH_THUNDER = 392
    MODERATE_OR_HEAVY_SNOW_WITH_THUNDER = 395


_C = WeatherCondition

CONDITIONS_BY_CODE: Dict[WWOWeatherCode, WeatherCondition] = {
    WWOWeatherCode.CLEAR_SUNNY: _C.CLEAR,
    WWOWeatherCode.PARTLY_CLOUDY: _C.PARTLY_CLOUDY,
    WWOWeatherCode.CLOUDY: _C.CLOUDY,
    WWOWeatherCode.OVERCAST: _C.OVERCAST,
    WWOWeatherCode.MIST: _C.MIST,
    WWOWeatherCode.PATCHY_RAIN_NEARBY: _C.PATCHY | _C.RAIN,
    WWOWeatherCode.PATCHY_SNOW_NEARBY: _C.PATCHY | _C.SNOW,
    WWOWeatherCode.PATCHY_SLEET_NEARBY: _C.PATCHY | _C.SLEET,
    WWOWeatherCode.PATCHY_FREEZING_DRIZZLE_NEARBY: _C.PATCHY | _C.FREEZING | _C.DRIZZLE,
    WWOWeatherCode.THUNDERY_OUTBREAKS_NEARBY: _C.THUNDER,
    WWOWeatherCode.BLOWING_SNOW: _C.BLOWING | _C.SNOW,
    WWOWeatherCode.BLIZZARD: _C.BLIZZARD | _C.SNOW,
    WWOWeatherCode.FOG: _C.FOG,
    WWOWeatherCode.FREEZING_FOG: _C.FREEZING | _C.FOG,
    WWOWeatherCode.PATCHY_LIGHT_DRIZZLE: _C.PATCHY | _C.LIGHT | _C.DRIZZLE,
    WWOWeatherCode.LIGHT_DRIZZLE: _C.LIGHT | _C.DRIZZLE,
    WWOWeatherCode.FREEZING_DRIZZLE: _C.FREEZING | _C.DRIZZLE,
    WWOWeatherCode.HEAVY_FREEZING_DRIZZLE: _C.HEAVY | _C.FREEZING | _C.DRIZZLE,
    WWOWeatherCode.PATCHY_LIGHT_RAIN: _C.PATCHY | _C.LIGHT | _C.RAIN,
    WWOWeatherCode.LIGHT_RAIN: _C.LIGHT | _C.RAIN,
    WWOWeatherCode.PATCHY_MODERATE_RAIN: _C.PATCHY | _C.MODERATE | _C.RAIN,
    WWOWeatherCode.MODERATE_RAIN: _C.MODERATE | _C.RAIN,
    WWOWeatherCode.PATCHY_HEAVY_RAIN: _C.PATCHY | _C.HEAVY | _C.RAIN,
    WWOWeatherCode.HEAVY_RAIN: _C.HEAVY | _C.RAIN,
    WWOWeatherCode.LIGHT_FREEZING_RAIN: _C.LIGHT | _C.FREEZING | _C.RAIN,
    WWOWeatherCode.MODERATE_OR_HEAVY_FREEZING_RAIN: _C.MODERATE | _C.HEAVY | _C.FREEZING | _C.RAIN,
    WWOWeatherCode.LIGHT_SLEET: _C.LIGHT | _C.SLEET,
    WWOWeatherCode.MODERATE_OR_HEAVY_SLEET: _C.MODERATE | _C.HEAVY | _C.SLEET,
    WWOWeatherCode.PATCHY_LIGHT_SNOW: _C.PATCHY | _C.LIGHT | _C.SNOW,
    WWOWeatherCode.LIGHT_SNOW: _C.LIGHT | _C.SNOW,
    WWOWeatherCode.PATCHY_MODERATE_SNOW: _C.PATCHY | _C.MODERATE | _C.SNOW,
    WWOWeatherCode.MODERATE_SNOW: _C.MODERATE | _C.SNOW,
    WWOWeatherCode.PATCHY_HEAVY_SNOW: _C.PATCHY | _C.HEAVY | _C.SNOW,
    WWOWeatherCode.HEAVY_SNOW: _C.HEAVY | _C.SNOW,
    WWOWeatherCode.ICE_PELLETS: _C.ICE | _C.PELLETS,
    WWOWeatherCode.LIGHT_RAIN_SHOWER: _C.LIGHT | _C.RAIN | _C.SHOWERS,
    WWOWeatherCode.MODERATE_OR_HEAVY_RAIN_SHOWER: _C.MODERATE | _C.HEAVY | _C.RAIN | _C.SHOWERS,
    WWOWeatherCode.TORRENTIAL_RAIN_SHOWER: _C.TORRENTIAL | _C.RAIN | _C.SHOWERS,
    WWOWeatherCode.LIGHT_SLEET_SHOWERS: _C.LIGHT | _C.SLEET | _C.SHOWERS,
    WWOWeatherCode.MODERATE_OR_HEAVY_SLEET_SHOWERS: _C.MODERATE | _C.HEAVY | _C.SLEET | _C.SHOWERS,
    WWOWeatherCode.LIGHT_SNOW_SHOWERS: _C.LIGHT | _C.SNOW | _C.SHOWERS,
    WWOWeatherCode.MODERATE_OR_HEAVY_SNOW_SHOWERS: _C.MODERATE | _C.HEAVY | _C.SNOW | _C.SHOWERS,
    WWOWeatherCode.LIGHT_ICE_PELLETS: _C.LIGHT | _C.ICE | _C.PELLETS,
    WWOWeatherCode.MODERATE_OR_HEAVY_ICE_PELLETS: _C.MODERATE | _C.HEAVY | _C.ICE | _C.PELLETS,
    WWOWeatherCode.PATCHY_LIGHT_RAIN_WITH_THUNDER: _C.PATCHY | _C.LIGHT | _C.RAIN | _C.THUNDER,
    WWOWeatherCode.MODERATE_OR_HEAVY_RAIN_WITH_THUNDER: _C.MODERATE | _C.HEAVY | _C.RAIN | _C.THUNDER,
    WWOWeatherCode.PATCHY_LIGHT_SNOW_WITH_THUNDER: _C.PATCHY | _C.LIGHT | _C.SNOW | _C.THUNDER,
    WWOWeatherCode.MODERATE_OR_HEAVY_SNOW_WITH_THUNDER: _C.MODERATE | _C.HEAVY | _C.SNOW | _C.THUNDER,
}


def translate_conditions(code: Union[int, WWOWeatherCode]) -> WeatherCondition:
    """
    Map a WWO weather code to condition flags.

    Codes missing from the table map to CLEAR; WWO adds codes without notice.
    """
    try:
        return CONDITIONS_BY_CODE[WWOWeatherCode(code)]
    except (KeyError, ValueError):
        logger.warning(
            "Unknown weather code",
            extra={"event": "unknown_condition_code", "provider": "world_weather_online", "code": code},
        )
        return WeatherCondition.CLEAR


class WorldWeatherOnlineProvider(BaseWeatherProvider):
    """Current conditions from the World Weather Online XML feed."""

    name = "world_weather_online"
    required_settings = (API_KEY_SETTING,)
    supported_sources = frozenset(
        {
            LocationSource.CITY_STATE,
            LocationSource.LATITUDE_LONGITUDE,
            LocationSource.ZIP_CODE,
        }
    )
    field_prefix = "current_condition/"

    translate_conditions = staticmethod(translate_conditions)

    @property
    def api_key(self) -> str:
        return self._config[API_KEY_SETTING]

    def location_query(self) -> str:
        return format_location(self.location, self.source, template="{city},{state}")

    def _build_request(self) -> Tuple[str, Dict[str, Any]]:
        params = {
            "q": self.location_query(),
            "format": RESPONSE_FORMAT,
            "num_of_days": 1,
            "key": self.api_key,
        }
        return self.settings.wwo_api_url, params

    @property
    def degrees_celsius(self) -> float:
        return self._float("temp_C")

    @property
    def degrees_fahrenheit(self) -> float:
        return self._float("temp_F")

    @property
    def wind_speed_mph(self) -> float:
        return self._non_negative("windspeedMiles")

    @property
    def wind_speed_kph(self) -> float:
        return self._non_negative("windspeedKmph")

    @property
    def wind_direction(self) -> Direction:
        return self._direction("winddir16Point")

    @property
    def cloud_cover(self) -> float:
        return self._percentage("cloudcover")

    @property
    def precipitation(self) -> float:
        return self._non_negative("precipMM")

    @property
    def humidity(self) -> float:
        return self._percentage("humidity")

    @property
    def conditions(self) -> WeatherCondition:
        raw = self._text("weatherCode")
        try:
            code = int(raw)
        except ValueError as e:
            raise MalformedUpstreamDataException("weatherCode", raw, "not an integer") from e
        return translate_conditions(code)
