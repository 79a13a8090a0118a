"""
Provider construction and selection.
"""

from typing import Dict, Iterable, List, Optional, Type

from weatherapi.config import Settings, get_settings
from weatherapi.definitions.locations import LocationSource
from weatherapi.exceptions import ProviderUnavailableException
from weatherapi.providers.base import BaseWeatherProvider
from weatherapi.providers.world_weather_online import WorldWeatherOnlineProvider
from weatherapi.providers.wunderground import WundergroundProvider
from weatherapi.utils.logger import setup_logger

logger = setup_logger(__name__)

PROVIDERS: Dict[str, Type[BaseWeatherProvider]] = {
    WundergroundProvider.name: WundergroundProvider,
    WorldWeatherOnlineProvider.name: WorldWeatherOnlineProvider,
}


def get_provider(
    name: str, settings: Optional[Settings] = None, transport=None
) -> BaseWeatherProvider:
    """Instantiate a provider by name."""
    key = name.lower()
    if key not in PROVIDERS:
        raise ValueError(f"Unsupported weather provider: {name}")
    return PROVIDERS[key](settings=settings, transport=transport)


def build_providers(
    settings: Optional[Settings] = None, transport=None
) -> List[BaseWeatherProvider]:
    """
    Instantiate every known provider in the configured preference order.

    Providers missing from settings.provider_order are appended after the
    configured ones. Unavailable providers are still returned.
    """
    settings = settings or get_settings()
    names = [name.lower() for name in settings.provider_order if name.lower() in PROVIDERS]
    names = list(dict.fromkeys(names + list(PROVIDERS)))
    return [get_provider(name, settings=settings, transport=transport) for name in names]


def select_provider(
    providers: Iterable[BaseWeatherProvider],
    source: Optional[LocationSource] = None,
) -> BaseWeatherProvider:
    """
    Return the first available provider, optionally one supporting source.

    Raises:
        ProviderUnavailableException: If no provider qualifies
    """
    providers = list(providers)
    for provider in providers:
        if not provider.is_available():
            continue
        if source is not None and not provider.supports(source):
            continue
        logger.info(
            "Weather provider selected",
            extra={
                "event": "provider_selected",
                "provider": provider.name,
                "source": source.value if source else None,
            },
        )
        return provider

    tried = [provider.name for provider in providers]
    raise ProviderUnavailableException(
        "any",
        message=f"No available weather provider supports {source} (tried: {tried})",
    )
