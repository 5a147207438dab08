# ABOUTME: Shared test fixtures for the weather chatbot test suite.
# ABOUTME: Provides WeatherAPI response bodies and disables real LLM calls.

import json
import os

import pydantic_ai.models
import pytest

# Prevent accidental LLM calls during testing
pydantic_ai.models.ALLOW_MODEL_REQUESTS = False

# weatherbot.agent builds its provider at import time, which requires a key
os.environ.setdefault("OPENROUTER_API_KEY", "test-key")

TORONTO_LOCATION = {
    "name": "Toronto",
    "region": "Ontario",
    "country": "Canada",
    "lat": 43.67,
    "lon": -79.42,
    "tz_id": "America/Toronto",
    "localtime_epoch": 1699148340,
    "localtime": "2023-11-04 21:39",
}

TORONTO_CURRENT = {
    "temp_c": 5.1,
    "is_day": 0,
    "condition": {
        "text": "Partly cloudy",
        "icon": "//cdn.weatherapi.com/weather/64x64/night/116.png",
        "code": 1003,
    },
    "wind_mph": 21.7,
    "wind_kph": 34.9,
    "wind_degree": 60,
    "wind_dir": "ENE",
    "pressure_mb": 1027.0,
    "pressure_in": 30.34,
    "precip_mm": 0.0,
    "precip_in": 0.0,
    "humidity": 87,
    "cloud": 50,
    "feelslike_c": 0.9,
    "feelslike_f": 33.7,
    "gust_mph": 26.2,
    "gust_kph": 42.1,
    "air_quality": {"co": 240.3, "no2": 12.1, "o3": 41.5, "us-epa-index": 1},
}

TORONTO_FORECAST = {
    "forecastday": [
        {
            "date": "2023-12-19",
            "date_epoch": 1702944000,
            "day": {
                "maxtemp_c": 11.6,
                "maxtemp_f": 52.9,
                "mintemp_c": 6.3,
                "mintemp_f": 43.3,
                "totalprecip_mm": 10.65,
                "avghumidity": 88,
                "condition": {
                    "text": "Moderate rain",
                    "icon": "//cdn.weatherapi.com/weather/64x64/day/302.png",
                    "code": 1189,
                },
            },
            "astro": {"sunrise": "07:47 AM", "sunset": "04:43 PM"},
            "hour": [],
        },
        {
            "date": "2023-12-20",
            "day": {"maxtemp_c": 4.0, "mintemp_c": -1.5, "totalprecip_mm": 0.0},
        },
    ]
}


@pytest.fixture
def location_data() -> dict:
    """WeatherAPI location block for Toronto."""
    return dict(TORONTO_LOCATION)


@pytest.fixture
def current_data() -> dict:
    """WeatherAPI current block for Toronto, extras included."""
    return dict(TORONTO_CURRENT)


@pytest.fixture
def current_body() -> str:
    """current.json body for Toronto, with air quality and other unmodeled fields."""
    return json.dumps({"location": TORONTO_LOCATION, "current": TORONTO_CURRENT})


@pytest.fixture
def forecast_body() -> str:
    """forecast.json body for Toronto with two forecast days."""
    return json.dumps({"location": TORONTO_LOCATION, "current": TORONTO_CURRENT, "forecast": TORONTO_FORECAST})
