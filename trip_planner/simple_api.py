"""FastAPI application serving scheduled itineraries with nearby recommendations."""

import logging
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .api import ItineraryPayload, add_common_middleware
from .planner import TripValidationError
from .scheduled_planner import build_scheduled_itinerary


logger = logging.getLogger(__name__)

app = FastAPI(title="Simple Travel Planner API", version="1.0.0")
add_common_middleware(app)


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "OK", "message": "Simple Travel Planner API is running"}


@app.post("/api/itinerary")
def create_scheduled_itinerary(payload: ItineraryPayload) -> Any:
    try:
        return build_scheduled_itinerary(payload.model_dump())
    except TripValidationError as exc:
        return JSONResponse(status_code=exc.status_code, content=exc.body)
    except (TypeError, ValueError) as exc:
        logger.warning("Error generating itinerary: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate itinerary", "message": str(exc)},
        )
