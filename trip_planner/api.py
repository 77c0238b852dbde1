"""FastAPI application exposing the trip planner."""

import logging
import traceback
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .planner import TripValidationError, plan_trip
from .services.currency import convert_currency, get_multiple_conversions
from .services.weather import resolve_weather


logger = logging.getLogger(__name__)

DEV_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


class ItineraryPayload(BaseModel):
    """Trip form as posted by the front end; field checks happen in the planner."""

    destination: Optional[str] = None
    budget: Optional[Union[float, str]] = None
    duration: Optional[Union[float, str]] = None
    interests: Optional[Union[List[str], str]] = None
    travelType: Optional[str] = None


def add_common_middleware(application: FastAPI) -> None:
    application.add_middleware(
        CORSMiddleware,
        allow_origins=DEV_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
        )


app = FastAPI(title="Travel Planner API", version="1.0.0")
add_common_middleware(app)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Something went wrong!",
            "message": str(exc),
            "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    )


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "OK", "message": "Travel Planner API is running"}


@app.post("/api/itinerary")
def create_itinerary(payload: ItineraryPayload) -> Any:
    try:
        return plan_trip(payload.model_dump())
    except TripValidationError as exc:
        return JSONResponse(status_code=exc.status_code, content=exc.body)


@app.get("/api/weather/{destination}")
def get_weather(destination: str) -> Dict[str, Any]:
    return resolve_weather(destination).to_dict()


@app.get("/api/currency/multiple/{amount}")
def get_currency_table(amount: float) -> Dict[str, Any]:
    conversions = get_multiple_conversions(amount, "INR")
    return {code: conversion.to_dict() for code, conversion in conversions.items()}


@app.get("/api/currency/{amount}")
def get_currency(amount: float) -> Dict[str, Any]:
    return convert_currency(amount, "INR", "USD").to_dict()
