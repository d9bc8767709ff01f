"""Compose the weather page's view model from an upstream snapshot."""

import math
from datetime import date, datetime, timezone
from decimal import Decimal

from app.errors import DataContractError
from app.models.location import Location
from app.models.view import NextDayView, TemplateContext
from app.models.weather import WeatherSnapshot
from app.weather_service.icons import get_feather_weather_icon
from app.weather_service.units import is_metric

NEXT_DAYS = 3
MIN_DAILY_ENTRIES = NEXT_DAYS + 1


def round_temperature(value: float) -> str:
    """Round half up to a whole number, as a string ("-0" never appears)."""
    return str(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Format a measurement as a plain decimal without a trailing ``.0``."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_date(local_date: date) -> str:
    """Return e.g. ``"3 June 2024"``."""
    return f"{local_date.day} {local_date.strftime('%B %Y')}"


def weekday_from_timestamp(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%a")


def check_snapshot(snapshot: WeatherSnapshot) -> None:
    """Ensure the snapshot holds everything the page indexes into.

    Raises:
        DataContractError: If a required sequence is too short.
    """
    if len(snapshot.daily) < MIN_DAILY_ENTRIES:
        raise DataContractError(
            f"Expected at least {MIN_DAILY_ENTRIES} daily entries, got {len(snapshot.daily)}"
        )
    if not snapshot.minutely:
        raise DataContractError("No minutely precipitation entries")
    if not snapshot.current.weather:
        raise DataContractError("No current weather conditions")
    for index, day in enumerate(snapshot.daily[1:MIN_DAILY_ENTRIES], start=1):
        if not day.weather:
            raise DataContractError(f"No weather conditions for daily entry {index}")


def build_next_days(snapshot: WeatherSnapshot) -> tuple[NextDayView, ...]:
    # daily[0] is today
    return tuple(
        NextDayView(
            day=weekday_from_timestamp(day.dt),
            temp=round_temperature(day.temp.day),
            icon=get_feather_weather_icon(day.weather[0].icon),
        )
        for day in snapshot.daily[1:MIN_DAILY_ENTRIES]
    )


def build_view_model(
    snapshot: WeatherSnapshot,
    location: Location,
    local_date: date,
    units: str,
) -> TemplateContext:
    """Build the template context for the weather page.

    This is a pure function of its arguments.

    Args:
        snapshot: Decoded upstream weather payload.
        location: Client location, for the city name.
        local_date: Today's date where the service runs.
        units: Units token the snapshot was requested with.

    Returns:
        The populated TemplateContext.

    Raises:
        DataContractError: If the snapshot lacks required entries.
    """
    check_snapshot(snapshot)
    current = snapshot.current
    condition = current.weather[0]
    return TemplateContext(
        day=local_date.strftime("%A"),
        day_short=local_date.strftime("%a"),
        date=format_date(local_date),
        city=location.city,
        temp=round_temperature(current.temp),
        rain=format_number(snapshot.minutely[0].precipitation),
        wind=format_number(current.wind_speed),
        humidity=format_number(current.humidity),
        description=condition.description.replace('"', ""),
        icon=get_feather_weather_icon(condition.icon),
        next_days=build_next_days(snapshot),
        is_metric=is_metric(units),
    )
