"""Client IP geolocation."""

from typing import Optional

import httpx

from app.errors import LocationError
from app.logging_config import logger
from app.models.location import Location


def client_ip_from_headers(forwarded_for: Optional[str], peer_host: Optional[str]) -> Optional[str]:
    """Pick the end user's IP address.

    Behind the edge, the first ``X-Forwarded-For`` entry is the original
    client; otherwise the socket peer is used.
    """
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    return peer_host or None


def geo_lookup(client_ip: Optional[str], *, url: str, timeout: float) -> Location:
    """Resolve an IP address to a Location.

    Args:
        client_ip: Address to look up.
        url: Geolocation endpoint, with an ``{ip}`` placeholder.
        timeout: Request timeout in seconds.

    Returns:
        The client's Location.

    Raises:
        LocationError: If there is no address or the lookup fails or
            returns no result.
    """
    if not client_ip:
        logger.error("LOCATION_NO_CLIENT_IP")
        raise LocationError("No client IP address")

    try:
        response = httpx.get(url.format(ip=client_ip), timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as exc:
        logger.error(
            "LOCATION_LOOKUP_BAD_STATUS", ip=client_ip, status=exc.response.status_code
        )
        raise LocationError("Location lookup failed") from exc
    except (httpx.RequestError, ValueError) as exc:
        logger.error("LOCATION_LOOKUP_FAILED", ip=client_ip, error=str(exc))
        raise LocationError("Location lookup failed") from exc

    try:
        if data.get("status") != "success":
            logger.error("LOCATION_NOT_FOUND", ip=client_ip, message=data.get("message"))
            raise LocationError(f"No location for {client_ip}")
        location = Location(
            latitude=data["lat"],
            longitude=data["lon"],
            city=data.get("city") or "",
            country_name=data.get("country") or "",
        )
    except (AttributeError, TypeError, KeyError, ValueError) as exc:
        logger.error("LOCATION_LOOKUP_BAD_PAYLOAD", ip=client_ip, error=str(exc))
        raise LocationError("Location lookup failed") from exc

    logger.info(
        "LOCATION_RESOLVED",
        lat=location.latitude,
        lon=location.longitude,
        city=location.city,
        country=location.country_name,
    )
    return location
