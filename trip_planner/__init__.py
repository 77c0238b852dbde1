"""Travel itinerary planner: template or model-drafted plans with weather and currency."""

from .models import CurrencyConversion, DayPlan, Itinerary, TripRequest, Weather
from .planner import TripValidationError, plan_trip, validate_trip_request

__all__ = [
    "CurrencyConversion",
    "DayPlan",
    "Itinerary",
    "TripRequest",
    "TripValidationError",
    "Weather",
    "plan_trip",
    "validate_trip_request",
]
