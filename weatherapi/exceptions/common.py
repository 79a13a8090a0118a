class WeatherAPIException(Exception):
    """Base exception for the weather providers."""
    def __init__(self, message: str):
        super().__init__(message)


class ProviderUnavailableException(WeatherAPIException):
    """Raised when a provider is used while its required configuration is missing."""

    def __init__(self, provider: str, missing: tuple = (), message: str = None):
        self.provider = provider
        self.missing = tuple(missing)
        message = message or f"Provider '{provider}' is not available"
        if self.missing:
            message += f" (missing settings: {', '.join(self.missing)})"
        super().__init__(message)


class UnsupportedLocationSourceException(WeatherAPIException):
    """Raised when a provider is given a location source it cannot address."""

    def __init__(self, provider: str, source):
        self.provider = provider
        self.source = source
        super().__init__(f"Provider '{provider}' does not support location source {source}")


class InvalidLocationException(WeatherAPIException):
    """Raised when a location string cannot be interpreted for its source."""


class DataUnavailableException(WeatherAPIException):
    """Raised when weather data is read before any refresh."""


class MalformedUpstreamDataException(WeatherAPIException):
    """Raised when a field in the provider document is missing or unparseable."""

    def __init__(self, field: str, value=None, reason: str = "missing"):
        self.field = field
        self.value = value
        message = f"Malformed upstream field '{field}': {reason}"
        if value is not None:
            message += f" (got {value!r})"
        super().__init__(message)


class ExternalAPIException(WeatherAPIException):
    """Raised when fetching or parsing a provider response fails."""
