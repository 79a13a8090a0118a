"""
Weather Underground provider.

Conditions arrive as a free-text phrase ("Light Thunderstorms and Rain") and
cloud cover only as an icon name, so both are translated heuristically.
"""

from typing import Any, Dict, Tuple

from weatherapi.definitions.conditions import WeatherCondition
from weatherapi.definitions.directions import Direction
from weatherapi.definitions.locations import LocationSource, format_location
from weatherapi.providers.base import BaseWeatherProvider
from weatherapi.utils.logger import setup_logger

logger = setup_logger(__name__)

API_KEY_SETTING = "WUNDERGROUND_API_KEY"
FEATURES = "conditions"
RESPONSE_FORMAT = "xml"

CONDITION_SYNONYMS: Dict[str, WeatherCondition] = {
    "hail": WeatherCondition.PELLETS,
    "patches": WeatherCondition.PATCHY,
    "partial": WeatherCondition.PATCHY,
    "shallow": WeatherCondition.LIGHT,
    "thunderstorm": WeatherCondition.THUNDER,
    "thunderstorms": WeatherCondition.THUNDER,
}

CHANCE_CLOUD_COVER = 0.8

CLOUD_COVER_BY_ICON: Dict[str, float] = {
    "clear": 0.0,
    "sunny": 0.0,
    "hazy": 0.3,
    "mostlysunny": 0.5,
    "partlycloudy": 0.5,
    "mostlycloudy": 0.7,
    "partlysunny": 0.7,
    "cloudy": 0.8,
    "flurries": 0.9,
    "sleet": 0.9,
    "rain": 1.0,
    "fog": 1.0,
    "snow": 1.0,
    "tstorms": 1.0,
    "unknown": 1.0,
}


def translate_conditions(phrase: str) -> WeatherCondition:
    """
    Translate a Wunderground weather phrase into condition flags.

    Each word is matched against the flag names, then the synonym table;
    unmatched words are ignored. A phrase that only yields qualifiers
    ("Patches", "Light") means nothing on its own and becomes CLEAR.
    """
    condition = WeatherCondition.CLEAR

    for word in phrase.split():
        flag = WeatherCondition.from_name(word)
        if flag is None:
            flag = CONDITION_SYNONYMS.get(word.lower())
        if flag is not None:
            condition |= flag

    return condition.canonical()


def translate_cloud_cover(icon: str) -> float:
    """
    Estimate cloud cover from a Wunderground icon name.

    Any "chance" icon (chancerain, chancetstorms, ...) counts as mostly
    cloudy; unknown icons count as clear.
    """
    if "chance" in icon:
        return CHANCE_CLOUD_COVER

    cover = CLOUD_COVER_BY_ICON.get(icon)
    if cover is None:
        logger.warning(
            "Unknown cloud cover icon",
            extra={"event": "unknown_condition_code", "provider": "wunderground", "icon": icon},
        )
        return 0.0
    return cover


class WundergroundProvider(BaseWeatherProvider):
    """Current conditions from the Weather Underground XML API."""

    name = "wunderground"
    required_settings = (API_KEY_SETTING,)
    supported_sources = frozenset(LocationSource)
    field_prefix = "current_observation/"

    translate_conditions = staticmethod(translate_conditions)
    translate_cloud_cover = staticmethod(translate_cloud_cover)

    @property
    def api_key(self) -> str:
        return self._config[API_KEY_SETTING]

    def location_query(self) -> str:
        """City/state locations are addressed as STATE/City_Name."""
        return format_location(
            self.location, self.source, template="{state}/{city}", separator="_"
        )

    def _build_request(self) -> Tuple[str, Dict[str, Any]]:
        base_url = self.settings.wunderground_api_url.rstrip("/")
        url = f"{base_url}/{self.api_key}/{FEATURES}/q/{self.location_query()}.{RESPONSE_FORMAT}"
        return url, {}

    @property
    def degrees_celsius(self) -> float:
        return self._float("temp_c")

    @property
    def degrees_fahrenheit(self) -> float:
        return self._float("temp_f")

    @property
    def wind_speed_mph(self) -> float:
        return self._non_negative("wind_mph")

    @property
    def wind_speed_kph(self) -> float:
        return self._non_negative("wind_kph")

    @property
    def wind_direction(self) -> Direction:
        return self._direction("wind_dir")

    @property
    def cloud_cover(self) -> float:
        return translate_cloud_cover(self._text("icon", allow_empty=True))

    @property
    def precipitation(self) -> float:
        return self._non_negative("precip_today_metric")

    @property
    def humidity(self) -> float:
        return self._percentage("relative_humidity")

    @property
    def conditions(self) -> WeatherCondition:
        return translate_conditions(self._text("weather", allow_empty=True))
