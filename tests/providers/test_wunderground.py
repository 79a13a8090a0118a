"""
Tests for the Weather Underground provider and its translators.
"""

from unittest.mock import patch

import pytest

from weatherapi.definitions.conditions import WeatherCondition as C
from weatherapi.definitions.directions import Direction
from weatherapi.definitions.locations import LocationSource
from weatherapi.providers.wunderground import (
    CLOUD_COVER_BY_ICON,
    WundergroundProvider,
    translate_cloud_cover,
    translate_conditions,
)


class TestTranslateConditions:
    """Test suite for free-text condition phrases."""

    @pytest.mark.parametrize(
        "phrase,expected",
        [
            ("Patchy light rain with thunder", C.PATCHY | C.LIGHT | C.RAIN | C.THUNDER),
            ("Heavy Snow", C.HEAVY | C.SNOW),
            ("Light Freezing Drizzle", C.LIGHT | C.FREEZING | C.DRIZZLE),
            ("Overcast", C.OVERCAST),
            ("Partly Cloudy", C.CLOUDY),
            ("Light Hail Showers", C.LIGHT | C.PELLETS | C.SHOWERS),
            ("Patches of Fog", C.PATCHY | C.FOG),
            ("Shallow Fog", C.LIGHT | C.FOG),
            ("Partial Fog", C.PATCHY | C.FOG),
            ("Light Thunderstorms and Rain", C.LIGHT | C.THUNDER | C.RAIN),
            ("Blowing Snow", C.BLOWING | C.SNOW),
            ("Clear", C.CLEAR),
        ],
    )
    def test_phrases(self, phrase, expected):
        """Test names, synonyms and ignored words combine into one union."""
        assert translate_conditions(phrase) == expected

    @pytest.mark.parametrize("phrase", ["Light", "Patches", "Heavy Patches", "Shallow"])
    def test_qualifier_only_phrase_is_clear(self, phrase):
        """Test that elliptical phrases without a phenomenon mean nothing."""
        assert translate_conditions(phrase) is C.CLEAR

    @pytest.mark.parametrize("phrase", ["", "   ", "Funnel Cloud", "Smoke"])
    def test_unresolvable_phrase_is_clear(self, phrase):
        """Test that empty and unknown phrases default to CLEAR."""
        assert translate_conditions(phrase) is C.CLEAR

    def test_deterministic(self):
        """Test that translating the same phrase twice agrees."""
        phrase = "Patchy light rain with thunder"

        assert translate_conditions(phrase) == translate_conditions(phrase)

    def test_whitespace_runs(self):
        """Test that repeated and mixed whitespace splits cleanly."""
        assert translate_conditions("Light \t Rain\n") == C.LIGHT | C.RAIN


class TestTranslateCloudCover:
    """Test suite for the icon cloud cover buckets."""

    @pytest.mark.parametrize(
        "icon,expected",
        [
            ("clear", 0.0),
            ("sunny", 0.0),
            ("hazy", 0.3),
            ("mostlysunny", 0.5),
            ("partlycloudy", 0.5),
            ("mostlycloudy", 0.7),
            ("partlysunny", 0.7),
            ("cloudy", 0.8),
            ("flurries", 0.9),
            ("sleet", 0.9),
            ("rain", 1.0),
            ("fog", 1.0),
            ("snow", 1.0),
            ("tstorms", 1.0),
            ("unknown", 1.0),
        ],
    )
    def test_buckets(self, icon, expected):
        """Test every exact-match bucket."""
        assert translate_cloud_cover(icon) == expected

    @pytest.mark.parametrize("icon", ["chance of rain", "chancerain", "chancetstorms", "chanceclear"])
    def test_chance_short_circuits(self, icon):
        """Test that any chance icon is 0.8 before the table is consulted."""
        assert translate_cloud_cover(icon) == 0.8

    def test_unmatched_icon_is_clear(self):
        """Test that unknown icons default to no cloud and are logged."""
        with patch("weatherapi.providers.wunderground.logger") as mock_logger:
            assert translate_cloud_cover("nt_aurora") == 0.0

        mock_logger.warning.assert_called_once()

    def test_table_within_unit_interval(self):
        """Test that every bucket is a valid fraction."""
        assert all(0.0 <= cover <= 1.0 for cover in CLOUD_COVER_BY_ICON.values())

    def test_available_on_provider(self):
        """Test that the translators are reachable from the provider class."""
        assert WundergroundProvider.translate_cloud_cover("mostlycloudy") == 0.7
        assert WundergroundProvider.translate_conditions("Heavy Snow") == C.HEAVY | C.SNOW


class TestWundergroundProvider:
    """Test suite for the provider's request and field mapping."""

    def test_supports_every_source(self, wunderground):
        """Test that Wunderground addresses every location source."""
        assert all(wunderground.supports(source) for source in LocationSource)

    def test_city_state_request(self, wunderground, mock_transport):
        """Test that city/state locations are sent as STATE/City_Name."""
        wunderground.set_location("San Francisco, CA", LocationSource.CITY_STATE)
        wunderground.update()

        url, params = mock_transport.fetch_document.call_args.args
        assert url == "http://wunderground.test/api/wu-test-key/conditions/q/CA/San_Francisco.xml"
        assert params == {}

    @pytest.mark.parametrize(
        "location,source",
        [
            ("47.61,-122.33", LocationSource.LATITUDE_LONGITUDE),
            ("KSEA", LocationSource.AIRPORT_CODE),
            ("98121", LocationSource.ZIP_CODE),
        ],
    )
    def test_verbatim_request(self, wunderground, mock_transport, location, source):
        """Test that other sources are placed into the URL unchanged."""
        wunderground.set_location(location, source)
        wunderground.update()

        url, _ = mock_transport.fetch_document.call_args.args
        assert url.endswith(f"/q/{location}.xml")

    def test_fields(self, wunderground):
        """Test the semantic mapping of every field after a refresh."""
        wunderground.set_location("Seattle, WA", LocationSource.CITY_STATE)
        wunderground.update()

        assert wunderground.degrees_celsius == 11.0
        assert wunderground.degrees_fahrenheit == 51.8
        assert wunderground.wind_speed_mph == 6.0
        assert wunderground.wind_speed_kph == 9.7
        assert wunderground.wind_direction is Direction.NNW
        assert wunderground.cloud_cover == 0.8
        assert wunderground.precipitation == 2.5
        assert wunderground.humidity == pytest.approx(0.65)
        assert wunderground.conditions == C.PATCHY | C.LIGHT | C.RAIN | C.THUNDER

    def test_empty_weather_phrase_is_clear(self, wunderground, wunderground_document):
        """Test that an empty weather element reads as CLEAR."""
        wunderground_document.find("current_observation/weather").text = ""
        wunderground.replace_document(wunderground_document)

        assert wunderground.conditions is C.CLEAR

    def test_empty_icon_is_clear_sky(self, wunderground, wunderground_document):
        """Test that an empty icon element falls back to no cloud cover."""
        wunderground_document.find("current_observation/icon").text = ""
        wunderground.replace_document(wunderground_document)

        assert wunderground.cloud_cover == 0.0

    def test_spelled_out_direction(self, wunderground, wunderground_document):
        """Test that Wunderground's cardinal words are understood."""
        wunderground_document.find("current_observation/wind_dir").text = "West"
        wunderground.replace_document(wunderground_document)

        assert wunderground.wind_direction is Direction.W

    def test_api_key_from_settings(self, settings):
        """Test that the key is resolved from the configuration."""
        provider = WundergroundProvider(settings=settings)

        assert provider.api_key == "wu-test-key"
