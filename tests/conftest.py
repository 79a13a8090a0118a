"""
Common test fixtures and configuration.
"""

import xml.etree.ElementTree as ET
from unittest.mock import MagicMock

import pytest

from weatherapi.config import Settings
from weatherapi.providers.world_weather_online import WorldWeatherOnlineProvider
from weatherapi.providers.wunderground import WundergroundProvider

WUNDERGROUND_XML = """<?xml version="1.0" ?>
<response>
  <version>0.1</version>
  <current_observation>
    <weather>Patchy Light Rain with Thunder</weather>
    <temp_f>51.8</temp_f>
    <temp_c>11.0</temp_c>
    <relative_humidity>65 %</relative_humidity>
    <wind_dir>NNW</wind_dir>
    <wind_mph>6.0</wind_mph>
    <wind_kph>9.7</wind_kph>
    <precip_today_metric>2.5</precip_today_metric>
    <icon>chancerain</icon>
  </current_observation>
</response>
"""

WWO_XML = """<?xml version="1.0" encoding="UTF-8"?>
<data>
  <request><type>City</type><query>Seattle, United States Of America</query></request>
  <current_condition>
    <observation_time>06:52 PM</observation_time>
    <temp_C>8</temp_C>
    <temp_F>46</temp_F>
    <weatherCode>308</weatherCode>
    <windspeedMiles>13</windspeedMiles>
    <windspeedKmph>20</windspeedKmph>
    <winddir16Point>SSW</winddir16Point>
    <precipMM>4.2</precipMM>
    <humidity>87</humidity>
    <cloudcover>75</cloudcover>
  </current_condition>
</data>
"""


def make_settings(**overrides) -> Settings:
    """Build settings isolated from the environment and any .env file."""
    values = {
        "wunderground_api_key": "wu-test-key",
        "wwo_api_key": "wwo-test-key",
        "wunderground_api_url": "http://wunderground.test/api",
        "wwo_api_url": "http://wwo.test/feed/weather.ashx",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def unconfigured_settings():
    return make_settings(wunderground_api_key=None, wwo_api_key=None)


@pytest.fixture
def wunderground_document():
    return ET.fromstring(WUNDERGROUND_XML)


@pytest.fixture
def wwo_document():
    return ET.fromstring(WWO_XML)


@pytest.fixture
def mock_transport():
    """
    Transport double recording every fetch.

    Yields:
        MagicMock: Object with a fetch_document method returning None by default
    """
    transport = MagicMock()
    transport.fetch_document.return_value = None
    return transport


@pytest.fixture
def wunderground(settings, mock_transport, wunderground_document):
    provider = WundergroundProvider(settings=settings, transport=mock_transport)
    mock_transport.fetch_document.return_value = wunderground_document
    return provider


@pytest.fixture
def wwo(settings, mock_transport, wwo_document):
    provider = WorldWeatherOnlineProvider(settings=settings, transport=mock_transport)
    mock_transport.fetch_document.return_value = wwo_document
    return provider
