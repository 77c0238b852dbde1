"""Tests for the weather resolver."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from trip_planner.services.weather import (
    describe_weather_code,
    mock_weather,
    resolve_weather,
    weather_icon,
)


def _open_meteo(mock_http, results, current=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "geocoding-api.open-meteo.com":
            assert request.url.params["count"] == "1"
            return httpx.Response(200, json={"results": results} if results is not None else {})
        return httpx.Response(200, json={"current": current})

    return mock_http(handler)


PARIS = {"name": "Paris", "country": "France", "latitude": 48.85, "longitude": 2.35}


def test_live_weather_is_mapped(settings, mock_http):
    current = {"temperature_2m": 21.6, "relative_humidity_2m": 48, "weather_code": 3, "wind_speed_10m": 11.2}
    with patch("trip_planner.services.weather.httpx.Client", _open_meteo(mock_http, [PARIS], current)):
        weather = resolve_weather("Paris", settings=settings)

    assert weather.to_dict() == {
        "temperature": 22,
        "condition": "Overcast",
        "humidity": 48,
        "windSpeed": 11.2,
        "location": "Paris, France",
        "icon": "02d",
    }


def test_unknown_place_falls_back_to_mock(settings, mock_http):
    with patch("trip_planner.services.weather.httpx.Client", _open_meteo(mock_http, [])):
        weather = resolve_weather("Atlantis by the Sea", settings=settings)

    assert weather == mock_weather("Atlantis by the Sea")
    assert weather.condition == "Sunny"


def test_transport_error_falls_back_to_mock(offline, settings):
    weather = resolve_weather("Zermatt Mountain Lodge", settings=settings)
    assert weather.temperature == 18
    assert weather.location == "Zermatt Mountain Lodge"


@pytest.mark.parametrize(
    "destination, condition",
    [
        ("Goa Beach", "Sunny"),
        ("Sea of Mountains", "Sunny"),
        ("Hill City", "Partly Cloudy"),
        ("Arabian Nights", "Hot and Sunny"),
        ("BALI", "Humid"),
        ("Metropolitan Area", "Clear"),
        ("Reykjavik", "Pleasant"),
    ],
)
def test_mock_weather_patterns_in_priority_order(destination, condition):
    weather = mock_weather(destination)
    assert weather.condition == condition
    assert weather.icon == "01d"
    assert weather.location == destination


def test_mock_weather_is_deterministic():
    assert mock_weather("Desert Safari") == mock_weather("Desert Safari")
    assert mock_weather("Reykjavik").to_dict() == {
        "temperature": 22,
        "condition": "Pleasant",
        "humidity": 65,
        "windSpeed": 10,
        "location": "Reykjavik",
        "icon": "01d",
    }


@pytest.mark.parametrize(
    "code, icon",
    [(0, "01d"), (2, "02d"), (45, "50d"), (61, "09d"), (75, "13d"), (81, "09d"), (96, "11d"), (85, "01d"), (100, "01d")],
)
def test_weather_icons(code, icon):
    assert weather_icon(code) == icon


def test_weather_descriptions():
    assert describe_weather_code(0) == "Clear sky"
    assert describe_weather_code(95) == "Thunderstorm"
    assert describe_weather_code(42) == "Unknown"


def test_weather_descriptions_follow_wmo_table():
    assert describe_weather_code(99) == "Ugly thunderstorm"
    assert describe_weather_code(96) == "Thunderstorm with hail"
    assert describe_weather_code(56) == "Unknown"
    assert describe_weather_code(67) == "Unknown"
    assert weather_icon(66) == "09d"
