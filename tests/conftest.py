"""Shared fixtures: no provider keys, and optionally no network."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from trip_planner.config import Settings, get_settings


PROVIDER_KEYS = ("OPENAI_API_KEY", "GEMINI_API_KEY", "CLAUDE_API_KEY", "ANTHROPIC_API_KEY")


@pytest.fixture(autouse=True)
def no_provider_keys(monkeypatch):
    for name in PROVIDER_KEYS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def offline():
    """Make the live weather and exchange-rate lookups fail as if unreachable."""

    error = httpx.ConnectError("network unreachable")
    with patch("trip_planner.services.weather.fetch_live_weather", side_effect=error) as weather, patch(
        "trip_planner.services.currency.fetch_live_conversion", side_effect=error
    ) as currency:
        yield weather, currency


@pytest.fixture
def mock_http():
    """Return a builder of ``httpx.Client`` replacements that route requests to a handler."""

    real_client = httpx.Client

    def build(handler):
        def factory(*args, **kwargs):
            return real_client(*args, transport=httpx.MockTransport(handler), **kwargs)

        return factory

    return build
