import pytest

from app.models.icon import FeatherIcon
from app.weather_service.icons import get_feather_weather_icon


@pytest.mark.parametrize(
    "code, icon",
    [
        ("01d", FeatherIcon.sun),
        ("01n", FeatherIcon.moon),
        ("02d", FeatherIcon.cloud),
        ("03n", FeatherIcon.cloud),
        ("04d", FeatherIcon.cloud),
        ("09d", FeatherIcon.cloud_drizzle),
        ("10n", FeatherIcon.cloud_rain),
        ("11d", FeatherIcon.cloud_lightning),
        ("13d", FeatherIcon.cloud_snow),
        ("50n", FeatherIcon.wind),
    ],
)
def test_known_codes(code, icon):
    assert get_feather_weather_icon(code) == icon


@pytest.mark.parametrize("code", ["", "99d", "xyz", "1"])
def test_unknown_codes_fall_back_to_cloud(code):
    assert get_feather_weather_icon(code) == FeatherIcon.cloud


def test_icon_values_are_feather_names():
    assert get_feather_weather_icon("13n").value == "cloud-snow"
