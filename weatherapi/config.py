"""
This module contains configuration settings for the weather providers.
"""

from functools import lru_cache
from typing import Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    log_level: str = "INFO"

    # Provider credentials
    wunderground_api_key: Optional[str] = None
    wwo_api_key: Optional[str] = None

    # Provider endpoints
    wunderground_api_url: str = "http://api.wunderground.com/api"
    wwo_api_url: str = "http://free.worldweatheronline.com/feed/weather.ashx"

    # Provider selection
    provider_order: List[str] = ["wunderground", "world_weather_online"]

    # Transport settings
    http_timeout: float = 10.0

    # Retry settings
    retry_max_attempts: int = 3
    retry_wait_min: float = 1.0
    retry_wait_max: float = 4.0

    def get_value(self, key: str) -> Optional[str]:
        """
        Look up a setting by its environment variable name.

        Returns None when the setting is unknown or unset.
        """
        value = getattr(self, key.lower(), None)
        if value is None:
            return None
        return str(value)


@lru_cache()
def get_settings() -> Settings:
    """
    Get the library settings.
    """
    return Settings()
