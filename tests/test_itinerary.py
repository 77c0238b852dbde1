"""Tests for itinerary generation and the template fallback."""

from __future__ import annotations

import json

import pytest

from trip_planner.itinerary import (
    ItineraryFormatError,
    build_itinerary_prompt,
    build_mock_itinerary,
    generate_itinerary,
    parse_itinerary_text,
)
from trip_planner.models import TripRequest


class StubGenerator:
    name = "stub"

    def __init__(self, reply: str = "", error: Exception = None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


def _request(**overrides):
    data = dict(destination="Paris", budget=50000, duration=3, travel_type="couple", interests=["food"])
    data.update(overrides)
    return TripRequest(**data)


def _model_reply(duration: int) -> str:
    return json.dumps(
        {
            "destination": "Paris",
            "duration": duration,
            "total_estimated_cost": 48000,
            "days": [
                {
                    "day": i + 1,
                    "theme": "Left Bank",
                    "activities": ["Walk"],
                    "attractions": ["Louvre"],
                    "estimated_cost": 16000,
                    "travel_tips": ["Book ahead"],
                }
                for i in range(duration)
            ],
            "general_tips": ["Carry cash"],
        }
    )


def test_paris_food_scenario_without_provider(settings):
    itinerary = generate_itinerary(_request(), settings=settings)

    assert itinerary["total_estimated_cost"] == 42500
    assert len(itinerary["days"]) == 3
    assert [day["estimated_cost"] for day in itinerary["days"]] == [14166, 14166, 14166]
    assert [day["theme"] for day in itinerary["days"]] == ["Food Journey", "Culinary Tour", "Local Cuisine"]
    assert [day["day"] for day in itinerary["days"]] == [1, 2, 3]


def test_mock_itinerary_cycles_interests_and_themes():
    itinerary = build_mock_itinerary(_request(duration=5, interests=["nature", "nightlife"]))
    themes = [day["theme"] for day in itinerary["days"]]
    assert themes == [
        "Nature Exploration",
        "Evening Entertainment",
        "Scenic Beauty",
        "Social Scene",
        "Nature Exploration",
    ]


@pytest.mark.parametrize("interests", [[], ["underwater basket weaving"]])
def test_mock_itinerary_defaults_to_culture_tables(interests):
    day = build_mock_itinerary(_request(duration=1, interests=interests))["days"][0]

    assert day["theme"] == "Cultural Immersion"
    assert day["schedule"]["morning"] == {
        "activities": ["Museum visit", "Historical site tour"],
        "attractions": ["Historical Monument", "Museum"],
    }
    assert day["schedule"]["afternoon"]["activities"] == ["Cultural performance"]
    assert day["schedule"]["evening"]["attractions"] == ["Heritage Site"]
    assert day["activities"] == [
        "Museum visit",
        "Historical site tour",
        "Cultural performance",
        "Art gallery exploration",
    ]


def test_mock_itinerary_fixed_tips():
    first = build_mock_itinerary(_request(destination="Goa", budget=12345, duration=2))
    second = build_mock_itinerary(_request(destination="Oslo", budget=99999, duration=4))

    assert first["general_tips"] == second["general_tips"]
    assert len(first["general_tips"]) == 5
    assert first["days"][0]["travel_tips"][0] == "Start early to avoid crowds"
    assert first["total_estimated_cost"] == 10493
    assert first["days"][0]["estimated_cost"] == 5246


def test_prompt_embeds_trip_details():
    prompt = build_itinerary_prompt(_request(interests=[]))
    assert "Paris" in prompt
    assert "₹50000" in prompt
    assert "Duration: 3 days" in prompt
    assert "Interests: General exploration" in prompt
    assert "Travel Type: couple" in prompt
    assert '"general_tips"' in prompt


def test_provider_reply_is_used_when_valid():
    generator = StubGenerator(reply="```json\n" + _model_reply(3) + "\n```")
    itinerary = generate_itinerary(_request(), generator=generator)

    assert itinerary["total_estimated_cost"] == 48000
    assert itinerary["days"][0]["theme"] == "Left Bank"
    assert len(generator.prompts) == 1


@pytest.mark.parametrize(
    "generator",
    [
        StubGenerator(reply="Here is your itinerary!"),
        StubGenerator(reply=_model_reply(2)),
        StubGenerator(reply="[1, 2, 3]"),
        StubGenerator(error=RuntimeError("429 Too Many Requests")),
    ],
)
def test_provider_failures_fall_back_to_template(generator):
    itinerary = generate_itinerary(_request(), generator=generator)

    assert itinerary["total_estimated_cost"] == 42500
    assert len(itinerary["days"]) == 3
    assert len(generator.prompts) == 1


def test_parse_itinerary_text_rejects_bad_day_list():
    with pytest.raises(ItineraryFormatError):
        parse_itinerary_text('{"days": "none"}', 1)
    with pytest.raises(ItineraryFormatError):
        parse_itinerary_text('{"days": [1]}', 1)
