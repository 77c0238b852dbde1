"""Itinerary generation: one upstream text-generation attempt, template fallback."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, Optional

from . import catalog
from .config import Settings, get_settings
from .llm import TextGenerator, select_text_generator
from .models import DayPlan, DaySchedule, Itinerary, TimeSlot, TripRequest, to_payload
from .utils import strip_code_fences


logger = logging.getLogger(__name__)

MOCK_BUDGET_SHARE = 0.85


class ItineraryFormatError(ValueError):
    """Raised when a provider reply is not a usable itinerary document."""


def build_itinerary_prompt(request: TripRequest) -> str:
    interests = ", ".join(request.interests) or "General exploration"
    return f"""You are an expert travel planner specializing in creating personalized, budget-conscious itineraries for Indian travelers.

Create a detailed day-wise travel itinerary for {request.destination} with the following specifications:
- Budget: ₹{request.budget} (Indian Rupees)
- Duration: {request.duration} days
- Interests: {interests}
- Travel Type: {request.travel_type}

IMPORTANT GUIDELINES:
1. Stay strictly within the budget - total cost should not exceed ₹{request.budget}
2. Distribute costs evenly across all days
3. Focus on authentic local experiences and value for money
4. Include practical, actionable advice
5. Consider Indian travel preferences and cultural context

RESPONSE FORMAT (Strict JSON):
{{
  "destination": "{request.destination}",
  "duration": {request.duration},
  "total_estimated_cost": number,
  "days": [
    {{
      "day": number,
      "theme": "string",
      "activities": ["string", "string", "string"],
      "attractions": ["string", "string", "string"],
      "estimated_cost": number,
      "travel_tips": ["string", "string"]
    }}
  ],
  "general_tips": ["string", "string", "string"]
}}

Generate realistic, practical, and inspiring travel plans that provide excellent value within the specified budget."""


def parse_itinerary_text(text: str, duration: int) -> Dict[str, Any]:
    """Decode a provider reply and check it has one day object per requested day."""

    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as exc:
        raise ItineraryFormatError(f"Provider reply is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ItineraryFormatError("Provider reply is not a JSON object.")
    days = data.get("days")
    if not isinstance(days, list) or not all(isinstance(day, dict) for day in days):
        raise ItineraryFormatError("Provider reply has no list of day objects.")
    if len(days) != duration:
        raise ItineraryFormatError(f"Provider returned {len(days)} day(s), expected {duration}.")
    return data


def _pick(values, index: int, fallback: int) -> str:
    return values[index] if len(values) > index else values[fallback]


def build_mock_day(request: TripRequest, index: int, total_cost: int) -> DayPlan:
    interests = request.interests
    interest = interests[index % len(interests)] if interests else catalog.DEFAULT_INTEREST
    key = interest.lower() if interest.lower() in catalog.INTEREST_THEMES else catalog.DEFAULT_INTEREST
    themes = catalog.INTEREST_THEMES[key]
    activities = catalog.INTEREST_ACTIVITIES[key]
    attractions = catalog.INTEREST_ATTRACTIONS[key]

    schedule = DaySchedule(
        morning=TimeSlot(activities=list(activities[:2]), attractions=list(attractions[:2])),
        afternoon=TimeSlot(activities=[_pick(activities, 2, 0)], attractions=[_pick(attractions, 2, 0)]),
        evening=TimeSlot(activities=[_pick(activities, 3, 1)], attractions=[_pick(attractions, 3, 1)]),
    )
    slots = (schedule.morning, schedule.afternoon, schedule.evening)
    return DayPlan(
        day=index + 1,
        theme=themes[index % len(themes)],
        activities=[item for slot in slots for item in slot.activities],
        attractions=[item for slot in slots for item in slot.attractions],
        estimated_cost=math.floor(total_cost / request.duration),
        travel_tips=list(catalog.DAY_TRAVEL_TIPS),
        schedule=schedule,
    )


def build_mock_itinerary(request: TripRequest) -> Dict[str, Any]:
    """Template itinerary drawn from the interest tables; deterministic for a given request."""

    total_cost = math.floor(request.budget * MOCK_BUDGET_SHARE)
    itinerary = Itinerary(
        destination=request.destination,
        duration=request.duration,
        total_estimated_cost=total_cost,
        days=[build_mock_day(request, i, total_cost) for i in range(request.duration)],
        general_tips=list(catalog.GENERAL_TIPS),
    )
    return to_payload(itinerary)


def generate_itinerary(
    request: TripRequest,
    settings: Optional[Settings] = None,
    generator: Optional[TextGenerator] = None,
) -> Dict[str, Any]:
    """Return an itinerary for ``request``. Never raises.

    The configured provider is called once. Any failure, or no provider at all,
    yields the template itinerary instead.
    """

    try:
        generator = generator or select_text_generator(settings or get_settings())
        if generator is None:
            logger.info("No text-generation provider configured; using template itinerary")
            return build_mock_itinerary(request)
        logger.info("Requesting itinerary for %s from %s", request.destination, generator.name)
        reply = generator.generate(build_itinerary_prompt(request))
        return parse_itinerary_text(reply, request.duration)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Fallback itinerary used due to error: %s", exc)
        return build_mock_itinerary(request)
