"""OpenWeatherMap One Call client."""

import httpx

from app.errors import (
    UpstreamDecodeError,
    UpstreamNetworkError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)
from app.logging_config import logger
from app.models.location import Location
from app.models.weather import WeatherSnapshot

# Every request must reach the API, never an intermediate cache.
PASS_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


def build_weather_params(location: Location, units: str, api_key: str) -> dict:
    """Return the query parameters for a One Call request.

    Args:
        location: Client location providing the coordinates.
        units: Units token, forwarded unchanged.
        api_key: OpenWeatherMap API key.

    Returns:
        Query parameters for the request.
    """
    return {
        "lat": location.latitude,
        "lon": location.longitude,
        "appid": api_key,
        "units": units,
    }


def get_weather_data_from_api(
    location: Location,
    units: str,
    *,
    api_key: str,
    url: str,
    timeout: float,
) -> WeatherSnapshot:
    """Fetch current and forecast weather for a location.

    A single attempt is made; failures are never retried.

    Args:
        location: Client location.
        units: Units token forwarded to the API.
        api_key: OpenWeatherMap API key.
        url: One Call endpoint.
        timeout: Request timeout in seconds.

    Returns:
        The decoded WeatherSnapshot.

    Raises:
        UpstreamTimeoutError: If the API does not answer within the timeout.
        UpstreamNetworkError: If the API cannot be reached.
        UpstreamStatusError: If the API answers with a non-2xx status.
        UpstreamDecodeError: If the payload is not the expected JSON.
    """
    log_context = {"lat": location.latitude, "lon": location.longitude, "units": units}
    logger.info("WEATHER_REQUEST", city=location.city, **log_context)
    try:
        response = httpx.get(
            url,
            params=build_weather_params(location, units, api_key),
            headers=PASS_HEADERS,
            timeout=timeout,
        )
        logger.info("WEATHER_RESPONSE", status=response.status_code, **log_context)
        response.raise_for_status()
    except httpx.TimeoutException as exc:
        logger.error("WEATHER_TIMEOUT", error=str(exc), **log_context)
        raise UpstreamTimeoutError("Weather lookup timed out") from exc
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        logger.error(
            "WEATHER_BAD_STATUS",
            status=status_code,
            body=exc.response.text[:200],
            **log_context,
        )
        raise UpstreamStatusError("Weather lookup failed", status_code) from exc
    except httpx.RequestError as exc:
        logger.error("WEATHER_REQUEST_FAILED", error=str(exc), **log_context)
        raise UpstreamNetworkError("Weather lookup failed") from exc

    # ValueError covers bad UTF-8, bad JSON and pydantic validation errors.
    try:
        return WeatherSnapshot.from_api_response(response.json())
    except ValueError as exc:
        logger.error("WEATHER_BAD_PAYLOAD", error=str(exc), **log_context)
        raise UpstreamDecodeError("Weather payload could not be decoded") from exc
