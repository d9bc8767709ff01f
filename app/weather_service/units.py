"""Units selection for the weather view."""

from typing import Optional

DEFAULT_UNITS = "metric"


def resolve_units(units: Optional[str]) -> str:
    """Return the units token to use for a request.

    The token is not validated: whatever the client sends is forwarded to
    the weather API, which falls back to its own default for values it
    does not know.

    Args:
        units: Raw ``units`` query parameter, if any.

    Returns:
        The units token, ``"metric"`` when none was given.
    """
    if units is None:
        return DEFAULT_UNITS
    return units


def is_metric(units: str) -> bool:
    return units == DEFAULT_UNITS
