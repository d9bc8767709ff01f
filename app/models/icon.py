"""Canonical icon names rendered by feather.js."""

from enum import Enum


class FeatherIcon(str, Enum):
    """Weather icons available in the Feather icon set."""

    sun = "sun"
    moon = "moon"
    cloud = "cloud"
    cloud_drizzle = "cloud-drizzle"
    cloud_rain = "cloud-rain"
    cloud_snow = "cloud-snow"
    cloud_lightning = "cloud-lightning"
    wind = "wind"
