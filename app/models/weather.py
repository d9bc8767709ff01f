"""OpenWeatherMap One Call payload models."""

from pydantic import BaseModel, ConfigDict


class WeatherCondition(BaseModel):
    """A single weather condition entry."""

    description: str
    icon: str


class CurrentReport(BaseModel):
    """Current conditions block."""

    temp: float
    wind_speed: float
    humidity: float
    weather: list[WeatherCondition]


class Temperatures(BaseModel):
    day: float


class DailyForecast(BaseModel):
    """One day of the daily forecast."""

    dt: int
    temp: Temperatures
    weather: list[WeatherCondition]


class MinutelyReport(BaseModel):
    precipitation: float


class WeatherSnapshot(BaseModel):
    """Weather payload decoded from the upstream API.

    Only the fields the view needs are declared; everything else in the
    upstream document is ignored. Length invariants are checked when the
    view model is built, not here.
    """

    model_config = ConfigDict(extra="ignore")

    current: CurrentReport
    daily: list[DailyForecast]
    minutely: list[MinutelyReport]

    @classmethod
    def from_api_response(cls, api_data: dict) -> "WeatherSnapshot":
        """Create a WeatherSnapshot from the external API payload.

        Args:
            api_data: Decoded JSON document returned by the One Call API.

        Returns:
            A populated WeatherSnapshot.

        Raises:
            pydantic.ValidationError: If the payload does not have the
                expected shape.
        """
        return cls.model_validate(api_data)
