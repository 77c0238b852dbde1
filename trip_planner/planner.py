"""Request orchestration: validate the trip form, gather the three parts, merge them.

The itinerary, weather and currency lookups are independent, so the LangGraph
workflow fans out from START to all three and joins them in ``merge_results``.
Validation runs before the graph is invoked, so a rejected request never
reaches an upstream service.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, TypedDict

from langgraph.graph import END, START, StateGraph

from .config import Settings, get_settings
from .itinerary import generate_itinerary
from .models import TripRequest
from .services.currency import convert_currency
from .services.weather import resolve_weather
from .utils import normalize_number


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("destination", "budget", "duration", "travelType")
MIN_BUDGET = 1000
MIN_DURATION = 1
MAX_DURATION = 30
BUDGET_CURRENCY = "INR"
DISPLAY_CURRENCY = "USD"


class TripValidationError(ValueError):
    """Raised for client errors; ``body`` is the JSON error document."""

    status_code = 400

    def __init__(self, body: Dict[str, Any]):
        super().__init__(body.get("error", "Invalid trip request"))
        self.body = body


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_blank_or_zero(value: Any) -> bool:
    """Like the default presence check, but numeric zero also counts as absent."""

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return _is_missing(value)


def missing_fields(
    payload: Mapping[str, Any], is_missing: Callable[[Any], bool] = _is_missing
) -> List[str]:
    return [name for name in REQUIRED_FIELDS if is_missing(payload.get(name))]


def require_fields(payload: Mapping[str, Any], is_missing: Callable[[Any], bool] = _is_missing) -> None:
    if missing_fields(payload, is_missing):
        raise TripValidationError(
            {"error": "Missing required fields", "required": list(REQUIRED_FIELDS)}
        )


def _parse_interests(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise TripValidationError({"error": "Interests must be a list of strings"})
    return [str(item).strip() for item in value if str(item).strip()]


def validate_trip_request(payload: Mapping[str, Any]) -> TripRequest:
    """Check the raw form fields and build a :class:`TripRequest`."""

    require_fields(payload)
    try:
        budget = float(payload["budget"])
        if not math.isfinite(budget):
            raise ValueError(budget)
    except (TypeError, ValueError):
        raise TripValidationError({"error": "Budget must be a number"}) from None
    try:
        duration = float(payload["duration"])
    except (TypeError, ValueError):
        raise TripValidationError({"error": "Duration must be a number"}) from None

    if budget < MIN_BUDGET:
        raise TripValidationError({"error": f"Budget must be at least ₹{MIN_BUDGET}"})
    if not duration.is_integer() or not MIN_DURATION <= duration <= MAX_DURATION:
        raise TripValidationError(
            {"error": f"Duration must be between {MIN_DURATION} and {MAX_DURATION} days"}
        )

    return TripRequest(
        destination=str(payload["destination"]).strip(),
        budget=normalize_number(budget),
        duration=int(duration),
        travel_type=str(payload["travelType"]).strip(),
        interests=_parse_interests(payload.get("interests")),
    )


def normalize_cost_aliases(itinerary: Dict[str, Any], budget: Any) -> Dict[str, Any]:
    """Make ``total_estimated_cost`` and ``total_estimated_cost_inr`` carry the same value."""

    total = itinerary.get("total_estimated_cost")
    if total is None:
        total = itinerary.get("total_estimated_cost_inr")
    if total is None:
        total = budget
    itinerary["total_estimated_cost"] = total
    itinerary["total_estimated_cost_inr"] = total
    return itinerary


# ---------------------------------------------------------------------------
# LangGraph workflow
# ---------------------------------------------------------------------------


class PlannerState(TypedDict, total=False):
    request: TripRequest
    settings: Settings
    itinerary: Dict[str, Any]
    weather: Dict[str, Any]
    currency_conversion: Dict[str, Any]
    response: Dict[str, Any]


def itinerary_writer(state: PlannerState) -> PlannerState:
    return {"itinerary": generate_itinerary(state["request"], settings=state.get("settings"))}


def weather_reporter(state: PlannerState) -> PlannerState:
    weather = resolve_weather(state["request"].destination, settings=state.get("settings"))
    return {"weather": weather.to_dict()}


def budget_converter(state: PlannerState) -> PlannerState:
    conversion = convert_currency(
        state["request"].budget, BUDGET_CURRENCY, DISPLAY_CURRENCY, settings=state.get("settings")
    )
    return {"currency_conversion": conversion.to_dict()}


def response_builder(state: PlannerState) -> PlannerState:
    itinerary = dict(state["itinerary"])
    itinerary["weather"] = state["weather"]
    itinerary["currency_conversion"] = state["currency_conversion"]
    normalize_cost_aliases(itinerary, state["request"].budget)
    return {"response": itinerary}


def _build_graph():
    workflow = StateGraph(PlannerState)
    workflow.add_node("write_itinerary", itinerary_writer)
    workflow.add_node("lookup_weather", weather_reporter)
    workflow.add_node("convert_budget", budget_converter)
    workflow.add_node("merge_results", response_builder)

    for node in ("write_itinerary", "lookup_weather", "convert_budget"):
        workflow.add_edge(START, node)
    workflow.add_edge(["write_itinerary", "lookup_weather", "convert_budget"], "merge_results")
    workflow.add_edge("merge_results", END)
    return workflow.compile()


@lru_cache(maxsize=1)
def get_planner_app():
    return _build_graph()


def build_trip_plan(request: TripRequest, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Run the workflow for an already validated request."""

    logger.info(
        "Planning %s-day trip to %s (budget %s)", request.duration, request.destination, request.budget
    )
    final_state: PlannerState = get_planner_app().invoke(
        {"request": request, "settings": settings or get_settings()}
    )
    return final_state["response"]


def plan_trip(payload: Mapping[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Validate raw form fields and return the merged itinerary document.

    Raises :class:`TripValidationError` for client errors; upstream failures are
    absorbed by the individual services.
    """

    request = validate_trip_request(payload)
    return build_trip_plan(request, settings=settings)
