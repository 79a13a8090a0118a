from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from weatherapi.definitions.conditions import WeatherCondition
from weatherapi.definitions.directions import Direction
from weatherapi.definitions.locations import LocationSource


class WeatherSnapshot(BaseModel):
    """
    Every contract field of a provider, read at one point in time.

    Attributes:
        provider: Name of the provider the values were read from
        location: Location string the provider was refreshed for
        source: Addressing scheme of the location
        cloud_cover: Fraction of sky covered, 0.0 (clear) to 1.0 (overcast)
        humidity: Relative humidity as a fraction
        conditions: Canonical condition flags
    """

    model_config = ConfigDict(frozen=True)

    provider: str = Field(..., description="Provider name")
    location: Optional[str] = Field(None, description="Location the data was fetched for")
    source: Optional[LocationSource] = Field(None, description="Location addressing scheme")
    degrees_celsius: float = Field(..., description="Temperature in Celsius")
    degrees_fahrenheit: float = Field(..., description="Temperature in Fahrenheit")
    wind_speed_mph: float = Field(..., ge=0, description="Wind speed in mph")
    wind_speed_kph: float = Field(..., ge=0, description="Wind speed in km/h")
    wind_direction: Direction = Field(..., description="Wind direction")
    cloud_cover: float = Field(..., ge=0, le=1, description="Cloud cover fraction")
    precipitation: float = Field(..., ge=0, description="Precipitation in millimeters")
    humidity: float = Field(..., ge=0, le=1, description="Relative humidity fraction")
    conditions: WeatherCondition = Field(..., description="Weather condition flags")
