"""Simple planner: time-of-day schedules with nearby recommendations, no upstream calls."""

from __future__ import annotations

import logging
import math
import random
from typing import Any, Dict, List, Mapping, Optional

from . import catalog
from .models import DaySchedule, ScheduledDay, TimeSlot, to_payload
from .planner import is_blank_or_zero, require_fields
from .services.recommendations import get_nearby_recommendations
from .utils import match_city, normalize_number


logger = logging.getLogger(__name__)


def day_theme(index: int, travel_type: str) -> str:
    themes = catalog.TRAVEL_STYLE_THEMES.get(
        (travel_type or "").lower(), catalog.TRAVEL_STYLE_THEMES[catalog.DEFAULT_TRAVEL_STYLE]
    )
    return themes[index % len(themes)]


def country_specific_tips(destination: str) -> List[str]:
    tips = match_city(destination, catalog.COUNTRY_TIPS)
    return list(tips if tips is not None else catalog.GENERIC_COUNTRY_TIPS)


def build_day_schedule(day: int) -> DaySchedule:
    return DaySchedule(
        morning=TimeSlot(
            activities=[f"Morning city tour {day}", f"Breakfast at local cafe {day}", f"Visit morning market {day}"],
            attractions=[f"Morning attraction {day}", f"Sunrise viewpoint {day}"],
            landmarks=[f"Historic landmark {day}", f"Cultural monument {day}"],
            points_of_interest=[f"Local neighborhood {day}", f"Scenic spot {day}"],
        ),
        afternoon=TimeSlot(
            activities=[f"Museum visit {day}", f"Lunch at specialty restaurant {day}", f"Shopping tour {day}"],
            attractions=[f"Main attraction {day}", f"Art gallery {day}"],
            landmarks=[f"Famous building {day}", f"Memorial site {day}"],
            points_of_interest=[f"Shopping district {day}", f"Cultural center {day}"],
        ),
        evening=TimeSlot(
            activities=[f"Dinner experience {day}", f"Evening entertainment {day}", f"Night walk {day}"],
            attractions=[f"Evening attraction {day}", f"Night market {day}"],
            landmarks=[f"Illuminated landmark {day}", f"Night monument {day}"],
            points_of_interest=[f"Entertainment district {day}", f"Rooftop bar {day}"],
        ),
    )


def build_scheduled_itinerary(
    payload: Mapping[str, Any], rng: Optional[random.Random] = None
) -> Dict[str, Any]:
    """Build the scheduled itinerary; only the presence of the four fields is checked.

    Raises :class:`~trip_planner.planner.TripValidationError` for missing fields
    (a zero budget or duration counts as missing) and ``ValueError`` when budget
    or duration are not finite numbers.
    """

    require_fields(payload, is_missing=is_blank_or_zero)
    destination = str(payload["destination"])
    travel_type = str(payload["travelType"])
    raw_budget = float(payload["budget"])
    raw_duration = float(payload["duration"])
    if not (math.isfinite(raw_budget) and math.isfinite(raw_duration)):
        raise ValueError("Budget and duration must be finite numbers")
    budget = normalize_number(raw_budget)
    duration = int(raw_duration)
    if duration < 1:
        raise ValueError("Duration must be at least one day")
    daily_budget = math.floor(budget / duration)
    logger.info("Building %s scheduled day(s) for %s", duration, destination)

    days = []
    for index in range(duration):
        day = index + 1
        days.append(
            ScheduledDay(
                day=day,
                theme=f"Day {day} - {day_theme(index, travel_type)}",
                schedule=build_day_schedule(day),
                estimated_cost_inr=daily_budget,
                travel_tips=[
                    f"Day {day} tip: Stay hydrated",
                    f"Day {day} tip: Keep local currency handy",
                    f"Day {day} tip: Wear comfortable shoes",
                ],
                nearby_recommendations=get_nearby_recommendations(destination, day, rng),
            )
        )

    return {
        "days": [to_payload(day) for day in days],
        "total_estimated_cost_inr": budget,
        "country_specific_tips": country_specific_tips(destination),
    }
