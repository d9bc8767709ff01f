"""Hemisphere-aware season selection."""

from app.models.season import Season

NORTHERN_SEASONS = {
    12: Season.winter,
    1: Season.winter,
    2: Season.winter,
    3: Season.spring,
    4: Season.spring,
    5: Season.spring,
    6: Season.summer,
    7: Season.summer,
    8: Season.summer,
    9: Season.autumn,
    10: Season.autumn,
    11: Season.autumn,
}

OPPOSITE_SEASONS = {
    Season.winter: Season.summer,
    Season.summer: Season.winter,
    Season.spring: Season.autumn,
    Season.autumn: Season.spring,
}


def get_season(latitude: float, month: int) -> Season:
    """Return the season for a latitude and calendar month.

    Args:
        latitude: Latitude in degrees; negative values are south of the
            equator, where seasons are inverted.
        month: Calendar month, 1 to 12.

    Returns:
        The Season at that place and time of year.

    Raises:
        ValueError: If the month is not between 1 and 12.
    """
    try:
        season = NORTHERN_SEASONS[month]
    except KeyError:
        raise ValueError(f"Invalid month: {month}") from None
    if latitude < 0:
        return OPPOSITE_SEASONS[season]
    return season
