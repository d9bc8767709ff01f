"""Season values used to pick the background image."""

from enum import Enum


class Season(str, Enum):
    """Meteorological seasons."""

    spring = "spring"
    summer = "summer"
    autumn = "autumn"
    winter = "winter"
