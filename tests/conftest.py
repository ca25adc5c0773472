"""Shared fixtures: canned OpenWeatherMap payloads and a fake ``requests.get``."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock, patch

import pytest

GEO_URL = "https://api.openweathermap.org/geo/1.0/zip"
ONECALL_URL = "https://api.openweathermap.org/data/3.0/onecall"

# Monday 2024-10-21 12:00 UTC
BASE_DT = 1729512000
DAY = 86400
NEW_YORK_OFFSET = -14400


def create_mock_response(status: int = 200, json_data: Any = None, json_error: Exception | None = None) -> Mock:
    """Build a ``requests.Response`` stand-in."""
    response = Mock()
    response.status_code = status
    response.ok = status < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


def make_geo_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "zip": "10001",
        "name": "New York",
        "lat": 40.7484,
        "lon": -73.9967,
        "country": "US",
    }
    payload.update(overrides)
    return payload


def make_onecall_payload(days: int = 8) -> dict[str, Any]:
    descriptions = ["clear sky", "few clouds", "light rain", "overcast clouds",
                    "moderate rain", "broken clouds", "scattered clouds", "snow"]
    icons = ["01d", "02d", "10d", "04d", "10d", "04d", "03d", "13d"]
    return {
        "lat": 40.7484,
        "lon": -73.9967,
        "timezone": "America/New_York",
        "timezone_offset": NEW_YORK_OFFSET,
        "current": {
            "dt": BASE_DT,
            "sunrise": BASE_DT - 2400,
            "sunset": BASE_DT + 36000,
            "temp": 72.5,
            "feels_like": 70.4,
            "pressure": 1015,
            "humidity": 48,
            "wind_speed": 9.22,
            "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        },
        "daily": [
            {
                "dt": BASE_DT + i * DAY,
                "temp": {"min": 60.49 - i, "max": 75.5 - i, "day": 70.0},
                "weather": [{"id": 800, "main": "Clear",
                             "description": descriptions[i % 8], "icon": icons[i % 8]}],
            }
            for i in range(days)
        ],
    }


@pytest.fixture
def geo_payload() -> dict[str, Any]:
    return make_geo_payload()


@pytest.fixture
def onecall_payload() -> dict[str, Any]:
    return make_onecall_payload()


@pytest.fixture
def fake_get():
    """Patch ``requests.get`` and route by URL.

    Yields a dict; tests put a Mock response (or an exception to raise) under
    ``"geo"`` and ``"onecall"``.
    """
    routes: dict[str, Any] = {}

    def dispatch(url: str, params=None, **kwargs):
        key = "geo" if url == GEO_URL else "onecall" if url == ONECALL_URL else None
        if key is None:
            raise AssertionError(f"unexpected URL {url}")
        reply = routes[key]
        if isinstance(reply, Exception):
            raise reply
        return reply

    with patch("zipcast.services.base.requests.get", side_effect=dispatch) as mock_get:
        routes["mock"] = mock_get
        yield routes


@pytest.fixture
def happy_upstream(fake_get, geo_payload, onecall_payload):
    fake_get["geo"] = create_mock_response(json_data=geo_payload)
    fake_get["onecall"] = create_mock_response(json_data=onecall_payload)
    return fake_get


@pytest.fixture
def flask_client():
    from app import app

    app.config.update(TESTING=True, OPENWEATHERMAP_API_KEY="test_key")
    with app.test_client() as client:
        yield client
