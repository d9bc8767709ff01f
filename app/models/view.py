"""View models consumed by the HTML template."""

from pydantic import BaseModel, ConfigDict

from app.models.icon import FeatherIcon


class NextDayView(BaseModel):
    """Minimal summary of one forecast day."""

    model_config = ConfigDict(frozen=True)

    day: str
    temp: str
    icon: FeatherIcon


class TemplateContext(BaseModel):
    """Every value the weather page displays."""

    model_config = ConfigDict(frozen=True)

    day: str
    day_short: str
    date: str
    city: str
    temp: str
    rain: str
    wind: str
    humidity: str
    description: str
    icon: FeatherIcon
    next_days: tuple[NextDayView, NextDayView, NextDayView]
    is_metric: bool
