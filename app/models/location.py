"""Location model for IP geolocation results."""

from pydantic import BaseModel, ConfigDict


class Location(BaseModel):
    """Client location resolved from the request's IP address."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    city: str
    country_name: str
