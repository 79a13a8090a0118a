"""
Shared configuration, location and document handling for weather providers.
"""

import math
import xml.etree.ElementTree as ET
from abc import abstractmethod
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Tuple

from weatherapi.config import Settings, get_settings
from weatherapi.definitions.directions import Direction
from weatherapi.definitions.locations import CityState, LocationSource
from weatherapi.exceptions import (
    DataUnavailableException,
    InvalidLocationException,
    MalformedUpstreamDataException,
    ProviderUnavailableException,
    UnsupportedLocationSourceException,
)
from weatherapi.models.weather import WeatherSnapshot
from weatherapi.providers.contract import WeatherReport
from weatherapi.services.transport import HTTPTransport
from weatherapi.utils.logger import setup_logger

logger = setup_logger(__name__)


class BaseWeatherProvider(WeatherReport):
    """
    Base class for providers backed by an external weather service.

    Subclasses declare the settings they need, the location sources they can
    address, and how to build a request; they implement the WeatherReport
    properties on top of the field helpers defined here.
    """

    name: ClassVar[str] = "base"
    required_settings: ClassVar[Tuple[str, ...]] = ()
    supported_sources: ClassVar[FrozenSet[LocationSource]] = frozenset(LocationSource)
    field_prefix: ClassVar[str] = ""

    def __init__(self, settings: Optional[Settings] = None, transport=None):
        """
        Resolve provider configuration. Never fails on missing configuration;
        check is_available() before use.
        """
        self.settings = settings or get_settings()
        self._transport = transport
        self._owns_transport = transport is None
        self._config: Dict[str, Optional[str]] = {
            key: self.settings.get_value(key) for key in self.required_settings
        }
        self._location: Optional[str] = None
        self._source: Optional[LocationSource] = None
        self._document: Optional[ET.Element] = None

        if not self.is_available():
            logger.warning(
                "Weather provider is not configured",
                extra={
                    "event": "provider_unavailable",
                    "provider": self.name,
                    "missing_settings": list(self.missing_settings),
                },
            )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(location={self._location!r}, "
            f"source={self._source}, available={self.is_available()})"
        )

    # Capabilities

    @property
    def missing_settings(self) -> Tuple[str, ...]:
        return tuple(key for key in self.required_settings if not self._config.get(key))

    def is_available(self) -> bool:
        """True when every required setting is present and non-empty."""
        return not self.missing_settings

    def supports(self, source: LocationSource) -> bool:
        return source in self.supported_sources

    # Location

    @property
    def location(self) -> Optional[str]:
        return self._location

    @property
    def source(self) -> Optional[LocationSource]:
        return self._source

    def set_location(self, location: str, source: LocationSource) -> None:
        """
        Set the place future refreshes are made for.

        Raises:
            UnsupportedLocationSourceException: If this provider cannot address source
            InvalidLocationException: If location is malformed for source
        """
        if not self.supports(source):
            raise UnsupportedLocationSourceException(self.name, source)
        if source is LocationSource.CITY_STATE:
            CityState.parse(location)
        self._location = location
        self._source = source
        logger.debug(
            "Provider location set",
            extra={"event": "location_set", "provider": self.name, "source": source.value},
        )

    # Document

    @property
    def transport(self):
        if self._transport is None:
            self._transport = HTTPTransport(settings=self.settings)
        return self._transport

    def close(self) -> None:
        """Close the transport if this provider created it."""
        if self._owns_transport and self._transport is not None:
            self._transport.close()
            self._transport = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def has_data(self) -> bool:
        return self._document is not None

    @property
    def document(self) -> ET.Element:
        if self._document is None:
            raise DataUnavailableException(
                f"No data from provider '{self.name}'; call update() first"
            )
        return self._document

    def replace_document(self, document: ET.Element) -> None:
        self._document = document

    @abstractmethod
    def _build_request(self) -> Tuple[str, Dict[str, Any]]:
        """Return the URL and query parameters for the current location."""

    def update(self) -> None:
        """
        Fetch the latest conditions for the current location.

        Raises:
            ProviderUnavailableException: If required settings are missing
            InvalidLocationException: If no location has been set
            ExternalAPIException: If the transport fails
        """
        if not self.is_available():
            raise ProviderUnavailableException(self.name, self.missing_settings)
        if self._location is None or self._source is None:
            raise InvalidLocationException(
                f"No location set for provider '{self.name}'"
            )

        url, params = self._build_request()
        document = self.transport.fetch_document(url, params)
        self.replace_document(document)
        logger.info(
            "Weather data refreshed",
            extra={
                "event": "document_refreshed",
                "provider": self.name,
                "source": self._source.value,
            },
        )

    def snapshot(self) -> WeatherSnapshot:
        """Read every contract field into a WeatherSnapshot."""
        return WeatherSnapshot(
            provider=self.name,
            location=self._location,
            source=self._source,
            degrees_celsius=self.degrees_celsius,
            degrees_fahrenheit=self.degrees_fahrenheit,
            wind_speed_mph=self.wind_speed_mph,
            wind_speed_kph=self.wind_speed_kph,
            wind_direction=self.wind_direction,
            cloud_cover=self.cloud_cover,
            precipitation=self.precipitation,
            humidity=self.humidity,
            conditions=self.conditions,
        )

    # Field helpers

    def _text(self, field: str, allow_empty: bool = False) -> str:
        value = self.document.findtext(self.field_prefix + field)
        if value is None or not (allow_empty or value.strip()):
            raise MalformedUpstreamDataException(field)
        return value.strip()

    def _float(self, field: str) -> float:
        raw = self._text(field)
        try:
            value = float(raw)
        except ValueError as e:
            raise MalformedUpstreamDataException(field, raw, "not a number") from e
        if not math.isfinite(value):
            raise MalformedUpstreamDataException(field, raw, "not a finite number")
        return value

    def _non_negative(self, field: str) -> float:
        value = self._float(field)
        if value < 0:
            raise MalformedUpstreamDataException(field, value, "negative value")
        return value

    def _percentage(self, field: str) -> float:
        """Read a "65", "65%" or "65 %" field as a fraction."""
        raw = self._text(field)
        try:
            value = float(raw.strip(" \t%")) / 100.0
        except ValueError as e:
            raise MalformedUpstreamDataException(field, raw, "not a percentage") from e
        if not 0.0 <= value <= 1.0:
            raise MalformedUpstreamDataException(field, raw, "percentage out of range")
        return value

    def _direction(self, field: str) -> Direction:
        raw = self._text(field)
        try:
            return Direction.parse(raw)
        except ValueError as e:
            raise MalformedUpstreamDataException(field, raw, "unknown direction") from e
