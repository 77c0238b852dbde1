"""HTTP surface tests for both FastAPI apps."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from trip_planner.api import app
from trip_planner.simple_api import app as simple_app


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def simple_client():
    return TestClient(simple_app)


PARIS_FORM = {
    "destination": "Paris",
    "budget": 50000,
    "duration": 3,
    "interests": ["food"],
    "travelType": "couple",
}


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "OK", "message": "Travel Planner API is running"}


def test_itinerary_with_template_fallback(client, offline):
    resp = client.post("/api/itinerary", json=PARIS_FORM)

    assert resp.status_code == 200
    body = resp.json()
    assert len(body["days"]) == 3
    assert body["total_estimated_cost"] == body["total_estimated_cost_inr"] == 42500
    assert {day["estimated_cost"] for day in body["days"]} == {14166}
    assert body["weather"]["condition"] == "Pleasant"
    assert body["currency_conversion"]["to"] == "USD"


def test_missing_travel_type_is_a_client_error(client):
    form = dict(PARIS_FORM)
    del form["travelType"]
    with patch("trip_planner.planner.generate_itinerary") as generate:
        resp = client.post("/api/itinerary", json=form)

    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Missing required fields",
        "required": ["destination", "budget", "duration", "travelType"],
    }
    generate.assert_not_called()


def test_budget_below_minimum(client):
    resp = client.post("/api/itinerary", json=dict(PARIS_FORM, budget=500))
    assert resp.status_code == 400
    assert resp.json() == {"error": "Budget must be at least ₹1000"}


def test_duration_out_of_range(client):
    resp = client.post("/api/itinerary", json=dict(PARIS_FORM, duration=45))
    assert resp.status_code == 400
    assert resp.json() == {"error": "Duration must be between 1 and 30 days"}


def test_malformed_body_is_a_client_error(client):
    resp = client.post("/api/itinerary", json=dict(PARIS_FORM, duration=[3]))
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"


def test_unexpected_error_returns_diagnostics(client):
    with patch("trip_planner.api.plan_trip", side_effect=RuntimeError("planner exploded")):
        resp = client.post("/api/itinerary", json=PARIS_FORM)

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Something went wrong!"
    assert body["message"] == "planner exploded"
    assert "RuntimeError" in body["stack"]


def test_weather_endpoint(client, offline):
    resp = client.get("/api/weather/Bondi Beach")
    assert resp.status_code == 200
    assert resp.json()["condition"] == "Sunny"
    assert resp.json()["location"] == "Bondi Beach"


def test_currency_endpoint_uses_mock_rate_when_offline(client, offline):
    resp = client.get("/api/currency/1000")

    assert resp.status_code == 200
    body = resp.json()
    assert body["amount"] == pytest.approx(12)
    assert body["rate"] == 0.012
    assert "note" in body


def test_multiple_currency_endpoint(client, offline):
    resp = client.get("/api/currency/multiple/1000")

    assert resp.status_code == 200
    assert list(resp.json()) == ["USD", "EUR", "GBP", "JPY", "AUD", "CAD"]


def test_simple_health(simple_client):
    assert simple_client.get("/api/health").json()["message"] == "Simple Travel Planner API is running"


def test_simple_itinerary(simple_client):
    resp = simple_client.post(
        "/api/itinerary",
        json={"destination": "Tokyo", "budget": "30000", "duration": "2", "travelType": "food"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert [day["theme"] for day in body["days"]] == ["Day 1 - Culinary Journey", "Day 2 - Food Discovery"]
    assert body["days"][1]["estimated_cost_inr"] == 15000
    assert "nearby_recommendations" in body["days"][0]
    assert body["country_specific_tips"][0] == "Bow when greeting locals"


def test_simple_itinerary_missing_fields(simple_client):
    resp = simple_client.post("/api/itinerary", json={"destination": "Tokyo"})
    assert resp.status_code == 400
    assert resp.json()["required"] == ["destination", "budget", "duration", "travelType"]


def test_simple_itinerary_rejects_non_numeric_budget(simple_client):
    resp = simple_client.post(
        "/api/itinerary",
        json={"destination": "Tokyo", "budget": "plenty", "duration": 2, "travelType": "food"},
    )
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to generate itinerary"


@pytest.mark.parametrize("overrides", [{"budget": "Infinity"}, {"duration": "inf"}, {"budget": "nan"}])
def test_simple_itinerary_rejects_non_finite_numbers(simple_client, overrides):
    form = dict({"destination": "Tokyo", "budget": 5000, "duration": 2, "travelType": "food"}, **overrides)
    resp = simple_client.post("/api/itinerary", json=form)

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json()["error"] == "Failed to generate itinerary"


@pytest.mark.parametrize("overrides", [{"duration": 0}, {"budget": 0}])
def test_simple_itinerary_treats_zero_as_missing(simple_client, overrides):
    form = dict({"destination": "Tokyo", "budget": 5000, "duration": 2, "travelType": "food"}, **overrides)
    resp = simple_client.post("/api/itinerary", json=form)

    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Missing required fields",
        "required": ["destination", "budget", "duration", "travelType"],
    }
