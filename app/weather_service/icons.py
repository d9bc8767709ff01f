"""OpenWeatherMap condition code to Feather icon mapping."""

from app.models.icon import FeatherIcon

DEFAULT_ICON = FeatherIcon.cloud

# Keyed by the two digit condition group; the d/n suffix only matters for
# clear sky.
ICON_CODE_MAP = {
    "02": FeatherIcon.cloud,
    "03": FeatherIcon.cloud,
    "04": FeatherIcon.cloud,
    "09": FeatherIcon.cloud_drizzle,
    "10": FeatherIcon.cloud_rain,
    "11": FeatherIcon.cloud_lightning,
    "13": FeatherIcon.cloud_snow,
    "50": FeatherIcon.wind,
}


def get_feather_weather_icon(code: str) -> FeatherIcon:
    """Map an upstream icon code such as ``"10d"`` to a Feather icon.

    Unknown codes fall back to a plain cloud.
    """
    code = (code or "").strip().lower()
    group, suffix = code[:2], code[2:]
    if group == "01":
        return FeatherIcon.moon if suffix == "n" else FeatherIcon.sun
    return ICON_CODE_MAP.get(group, DEFAULT_ICON)
