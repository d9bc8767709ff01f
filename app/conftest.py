import pytest

from app.models.location import Location
from app.models.weather import WeatherSnapshot

# Noon UTC on Mon 3 June 2024 and the four days after it.
DAILY_TIMESTAMPS = [1717416000, 1717502400, 1717588800, 1717675200, 1717761600]


def _make_payload(daily_count=5, minutely_count=2, description="light rain"):
    """Build a One Call style payload with the fields the service reads."""
    return {
        "lat": 51.51,
        "lon": -0.13,
        "timezone": "Europe/London",
        "current": {
            "dt": 1717416000,
            "temp": 17.6,
            "wind_speed": 3.6,
            "humidity": 82,
            "weather": [{"id": 500, "main": "Rain", "description": description, "icon": "10d"}],
        },
        "minutely": [
            {"dt": 1717416000 + 60 * i, "precipitation": 0.25} for i in range(minutely_count)
        ],
        "daily": [
            {
                "dt": DAILY_TIMESTAMPS[i % len(DAILY_TIMESTAMPS)],
                "temp": {"day": 18.5 + i, "min": 11.0, "max": 21.0},
                "weather": [{"description": "sky", "icon": icon}],
            }
            for i, icon in zip(range(daily_count), ["01d", "02d", "13d", "11n", "50d"] * 2)
        ],
    }


@pytest.fixture
def weather_payload():
    return _make_payload()


@pytest.fixture
def snapshot(weather_payload):
    return WeatherSnapshot.from_api_response(weather_payload)


@pytest.fixture
def london():
    return Location(latitude=51.51, longitude=-0.13, city="London", country_name="United Kingdom")


@pytest.fixture
def make_payload():
    return _make_payload
