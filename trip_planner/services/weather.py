"""Current weather via Open-Meteo with a name-pattern fallback."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import httpx

from ..config import Settings, get_settings
from ..models import Weather


logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m"
DEFAULT_ICON = "01d"

# WMO weather interpretation codes
WEATHER_DESCRIPTIONS: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight showers",
    81: "Moderate showers",
    82: "Violent showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Ugly thunderstorm",
}

# (lowest code, highest code, icon), first match wins
WEATHER_ICON_RANGES: Tuple[Tuple[int, int, str], ...] = (
    (0, 0, "01d"),
    (1, 3, "02d"),
    (45, 48, "50d"),
    (51, 67, "09d"),
    (71, 77, "13d"),
    (80, 82, "09d"),
    (95, 99, "11d"),
)

# (keywords, (temperature, condition, humidity, wind speed)), checked in order
MOCK_WEATHER_PATTERNS: Tuple[Tuple[Tuple[str, ...], Tuple[int, str, int, int]], ...] = (
    (("beach", "coast", "sea"), (28, "Sunny", 70, 15)),
    (("mountain", "hill", "peak"), (18, "Partly Cloudy", 55, 20)),
    (("desert", "sahara", "arabian"), (35, "Hot and Sunny", 25, 8)),
    (("tropical", "amazon", "bali"), (30, "Humid", 80, 12)),
    (("city", "urban", "metropolitan"), (25, "Clear", 60, 10)),
)
MOCK_WEATHER_DEFAULT = (22, "Pleasant", 65, 10)


class WeatherLookupError(RuntimeError):
    """Raised when the live weather lookup cannot produce a result."""


def describe_weather_code(code: Optional[int]) -> str:
    return WEATHER_DESCRIPTIONS.get(code, "Unknown")


def weather_icon(code: Optional[int]) -> str:
    if code is None:
        return DEFAULT_ICON
    for low, high, icon in WEATHER_ICON_RANGES:
        if low <= code <= high:
            return icon
    return DEFAULT_ICON


def mock_weather(destination: str) -> Weather:
    """Pattern-matched stand-in keyed on words in the destination name."""

    lowered = destination.lower()
    temperature, condition, humidity, wind_speed = MOCK_WEATHER_DEFAULT
    for keywords, values in MOCK_WEATHER_PATTERNS:
        if any(keyword in lowered for keyword in keywords):
            temperature, condition, humidity, wind_speed = values
            break
    return Weather(
        temperature=temperature,
        condition=condition,
        humidity=humidity,
        wind_speed=wind_speed,
        location=destination,
        icon=DEFAULT_ICON,
    )


def _geocode(client: httpx.Client, destination: str) -> dict:
    params = {"name": destination, "count": 1, "language": "en", "format": "json"}
    resp = client.get(GEOCODING_URL, params=params)
    resp.raise_for_status()
    results = resp.json().get("results") or []
    if not results:
        raise WeatherLookupError(f"Location not found: {destination}")
    return results[0]


def fetch_live_weather(destination: str, timeout: float = 10.0) -> Weather:
    """Geocode ``destination`` and read current conditions for the best match."""

    with httpx.Client(timeout=timeout) as client:
        place = _geocode(client, destination)
        params = {
            "latitude": place["latitude"],
            "longitude": place["longitude"],
            "current": CURRENT_FIELDS,
            "wind_speed_unit": "kmh",
        }
        resp = client.get(FORECAST_URL, params=params)
        resp.raise_for_status()
        current = resp.json()["current"]

    code = current.get("weather_code")
    location = ", ".join(part for part in (place.get("name"), place.get("country")) if part)
    return Weather(
        temperature=round(current["temperature_2m"]),
        condition=describe_weather_code(code),
        humidity=current["relative_humidity_2m"],
        wind_speed=current["wind_speed_10m"],
        location=location or destination,
        icon=weather_icon(code),
    )


def resolve_weather(destination: str, settings: Optional[Settings] = None) -> Weather:
    """Return current weather for ``destination``. Never raises."""

    settings = settings or get_settings()
    try:
        return fetch_live_weather(destination, timeout=settings.http_timeout)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Mock weather used for %s due to error: %s", destination, exc)
        return mock_weather(destination)
