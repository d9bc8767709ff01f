"""Process-wide configuration and embedded static assets.

Both are loaded once when the application starts and are never mutated
afterwards, so request handlers can share them freely.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.errors import ConfigError
from app.logging_config import logger
from app.models.season import Season

DEFAULT_WEATHER_API_URL = "https://api.openweathermap.org/data/2.5/onecall"
DEFAULT_GEO_API_URL = "http://ip-api.com/json/{ip}"
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "static"

BACKGROUND_FILES = {
    Season.spring: "img/spring.jpg",
    Season.summer: "img/summer.jpg",
    Season.autumn: "img/autumn.jpg",
    Season.winter: "img/winter.jpg",
}


class Settings(BaseModel):
    """Runtime settings read from the environment."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    weather_api_url: str = DEFAULT_WEATHER_API_URL
    weather_timeout_s: float = 5.0
    geo_api_url: str = DEFAULT_GEO_API_URL
    geo_timeout_s: float = 3.0
    static_dir: Path = DEFAULT_STATIC_DIR
    metrics_port: Optional[int] = None


class StaticAssets(BaseModel):
    """Files served verbatim by the router."""

    model_config = ConfigDict(frozen=True)

    style_css: str
    feather_js: str
    backgrounds: dict[Season, bytes]

    def background_for(self, season: Season) -> bytes:
        return self.backgrounds[season]


def load_settings() -> Settings:
    """Build Settings from environment variables.

    Returns:
        The populated Settings.

    Raises:
        ConfigError: If the weather API key is not set or a numeric value
            cannot be parsed.
    """
    api_key = os.getenv("WEATHER_AUTH_KEY")
    if not api_key:
        logger.error("CONFIG_MISSING_API_KEY", variable="WEATHER_AUTH_KEY")
        raise ConfigError("No OpenWeatherMap API key configured")

    metrics_port = os.getenv("METRICS_PORT")
    try:
        return Settings(
            api_key=api_key,
            weather_api_url=os.getenv("WEATHER_API_URL", DEFAULT_WEATHER_API_URL),
            weather_timeout_s=float(os.getenv("WEATHER_TIMEOUT_S", "5")),
            geo_api_url=os.getenv("GEO_API_URL", DEFAULT_GEO_API_URL),
            geo_timeout_s=float(os.getenv("GEO_TIMEOUT_S", "3")),
            static_dir=Path(os.getenv("STATIC_DIR", str(DEFAULT_STATIC_DIR))),
            metrics_port=int(metrics_port) if metrics_port else None,
        )
    except ValueError as exc:
        logger.error("CONFIG_INVALID", error=str(exc))
        raise ConfigError("Invalid configuration value") from exc


def load_static_assets(static_dir: Path) -> StaticAssets:
    """Read the stylesheet, script and background images from disk.

    Args:
        static_dir: Directory containing ``style.css``, ``feather.min.js``
            and the ``img/`` backgrounds.

    Returns:
        StaticAssets holding the file contents.

    Raises:
        ConfigError: If any of the files cannot be read.
    """
    try:
        return StaticAssets(
            style_css=(static_dir / "style.css").read_text(encoding="utf-8"),
            feather_js=(static_dir / "feather.min.js").read_text(encoding="utf-8"),
            backgrounds={
                season: (static_dir / name).read_bytes()
                for season, name in BACKGROUND_FILES.items()
            },
        )
    except OSError as exc:
        logger.error("CONFIG_STATIC_ASSET_MISSING", path=str(static_dir), error=str(exc))
        raise ConfigError("Static assets could not be loaded") from exc
