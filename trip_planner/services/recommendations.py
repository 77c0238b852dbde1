"""Nearby hotels, food, shopping and sights for a destination, placed around its centre."""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Tuple

from .. import catalog
from ..utils import jitter, match_city


HOTEL_SPREAD = 0.02
FOOD_SPREAD = 0.01
SPOT_SPREAD = 0.03


def destination_coordinates(destination: str) -> Tuple[float, float]:
    """Base coordinate for the destination; New York when the city is unknown."""

    return match_city(destination, catalog.CITY_COORDINATES, default=catalog.DEFAULT_CITY)


def _day_name(name: str, day: int) -> str:
    return f"{name} - Day {day}"


def _near(base: Tuple[float, float], spread: float, rng: Optional[random.Random]) -> Dict[str, float]:
    lat, lng = base
    return {"latitude": jitter(lat, spread, rng), "longitude": jitter(lng, spread, rng)}


def get_hotels(destination: str, day: int, rng: Optional[random.Random] = None) -> List[Dict[str, Any]]:
    base = destination_coordinates(destination)
    hotels = match_city(destination, catalog.CITY_HOTELS, default=catalog.DEFAULT_CITY)
    return [
        {
            "name": _day_name(name, day),
            "category": category,
            "approx_distance_km_from_attractions": distance,
            "rating_out_of_5": rating,
            "average_price_per_night_inr": price,
            **_near(base, HOTEL_SPREAD, rng),
        }
        for name, category, price, rating, distance in hotels
    ]


def get_food_places(destination: str, day: int, rng: Optional[random.Random] = None) -> Dict[str, List[Dict[str, Any]]]:
    base = destination_coordinates(destination)
    food = match_city(destination, catalog.CITY_FOOD, default=catalog.DEFAULT_CITY)
    return {
        slot: [
            {
                "name": _day_name(name, day),
                "type": kind,
                "cuisine": cuisine,
                "average_price_inr": price,
                **_near(base, FOOD_SPREAD, rng),
            }
            for name, kind, cuisine, price in food[slot]
        ]
        for slot in ("morning", "afternoon", "evening")
    }


def get_shopping_spots(destination: str, day: int, rng: Optional[random.Random] = None) -> List[Dict[str, Any]]:
    base = destination_coordinates(destination)
    spots = match_city(destination, catalog.CITY_SHOPPING, default=catalog.DEFAULT_CITY)
    return [
        {
            "name": _day_name(name, day),
            "type": kind,
            "description": description,
            "price_range": price_range,
            **_near(base, SPOT_SPREAD, rng),
        }
        for name, kind, description, price_range in spots
    ]


def _entry_fee(rng: Optional[random.Random]) -> int:
    source = rng or random
    if source.random() > 0.5:
        return source.randint(200, 1199)
    return 0


def get_optional_places(destination: str, day: int, rng: Optional[random.Random] = None) -> List[Dict[str, Any]]:
    base = destination_coordinates(destination)
    places = match_city(destination, catalog.CITY_OPTIONAL_PLACES, default=catalog.DEFAULT_CITY)
    return [
        {
            "name": _day_name(name, day),
            "type": kind,
            "description": description,
            "entry_fee_inr": _entry_fee(rng),
            **_near(base, SPOT_SPREAD, rng),
        }
        for name, kind, description in places
    ]


def get_cost_saving_alternatives(
    destination: str, day: int, rng: Optional[random.Random] = None
) -> List[Dict[str, Any]]:
    lat, lng = destination_coordinates(destination)
    alternatives = [
        {
            "name": f"Public Transport Day Pass {day}",
            "type": "transport",
            "approx_savings_in_inr": 800,
            "explanation": "Unlimited travel on buses and metro instead of taxis",
            "latitude": lat,
            "longitude": lng,
        }
    ]
    for name, kind, savings, explanation in (
        ("Free Walking Tour", "experience", 1500, "Guided tour with tips-based payment instead of paid tours"),
        ("Local Eatery", "food", 600, "Authentic local restaurant instead of tourist places"),
        ("Free Museum Entry", "attraction", 500, "Visit during free entry hours or days"),
    ):
        alternatives.append(
            {
                "name": f"{name} {day}",
                "type": kind,
                "approx_savings_in_inr": savings,
                "explanation": explanation,
                **_near((lat, lng), HOTEL_SPREAD, rng),
            }
        )
    return alternatives


def get_nearby_recommendations(
    destination: str, day: int, rng: Optional[random.Random] = None
) -> Dict[str, Any]:
    """Bundle every recommendation group for one day of the trip."""

    return {
        "hotels_nearby": get_hotels(destination, day, rng),
        "food_nearby": get_food_places(destination, day, rng),
        "shopping_spots": get_shopping_spots(destination, day, rng),
        "optional_places": get_optional_places(destination, day, rng),
        "cost_saving_alternatives": get_cost_saving_alternatives(destination, day, rng),
    }
