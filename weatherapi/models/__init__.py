from weatherapi.models.weather import WeatherSnapshot

__all__ = ["WeatherSnapshot"]
