import pytest

from app.config import DEFAULT_STATIC_DIR, load_settings, load_static_assets
from app.errors import ConfigError
from app.models.season import Season


def test_load_settings(monkeypatch):
    monkeypatch.setenv("WEATHER_AUTH_KEY", "secret")
    monkeypatch.setenv("WEATHER_TIMEOUT_S", "2.5")
    monkeypatch.delenv("METRICS_PORT", raising=False)

    settings = load_settings()

    assert settings.api_key == "secret"
    assert settings.weather_timeout_s == 2.5
    assert settings.weather_api_url.endswith("/data/2.5/onecall")
    assert settings.metrics_port is None


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("WEATHER_AUTH_KEY", raising=False)
    with pytest.raises(ConfigError):
        load_settings()


def test_invalid_number(monkeypatch):
    monkeypatch.setenv("WEATHER_AUTH_KEY", "secret")
    monkeypatch.setenv("WEATHER_TIMEOUT_S", "soon")
    with pytest.raises(ConfigError):
        load_settings()


def test_load_bundled_static_assets():
    assets = load_static_assets(DEFAULT_STATIC_DIR)

    assert "feather" in assets.feather_js
    assert ".weather-side" in assets.style_css
    assert set(assets.backgrounds) == set(Season)
    for season in Season:
        image = assets.background_for(season)
        assert image.startswith(b"\xff\xd8")
        assert season.value.encode() in image


def test_missing_static_assets(tmp_path):
    with pytest.raises(ConfigError):
        load_static_assets(tmp_path)
