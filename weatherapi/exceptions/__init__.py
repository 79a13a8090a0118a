"""Weather provider exceptions."""

from .common import (
    WeatherAPIException,
    ProviderUnavailableException,
    UnsupportedLocationSourceException,
    InvalidLocationException,
    DataUnavailableException,
    MalformedUpstreamDataException,
    ExternalAPIException,
)

__all__ = [
    "WeatherAPIException",
    "ProviderUnavailableException",
    "UnsupportedLocationSourceException",
    "InvalidLocationException",
    "DataUnavailableException",
    "MalformedUpstreamDataException",
    "ExternalAPIException",
]
