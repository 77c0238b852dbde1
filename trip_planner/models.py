"""Core data models for the trip planner."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]


def _drop_none(items) -> Dict[str, Any]:
    return {key: value for key, value in items if value is not None}


@dataclass
class TripRequest:
    destination: str
    budget: Number
    duration: int
    travel_type: str
    interests: List[str] = field(default_factory=list)


@dataclass
class Weather:
    temperature: Number
    condition: str
    humidity: Number
    wind_speed: Number
    location: str
    icon: str = "01d"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "condition": self.condition,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "location": self.location,
            "icon": self.icon,
        }


@dataclass
class CurrencyConversion:
    amount: float
    rate: float
    from_currency: str
    to_currency: str
    last_updated: int
    note: Optional[str] = None

    @property
    def is_mock(self) -> bool:
        return self.note is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "amount": self.amount,
            "rate": self.rate,
            "from": self.from_currency,
            "to": self.to_currency,
            "lastUpdated": self.last_updated,
        }
        if self.note is not None:
            data["note"] = self.note
        return data


@dataclass
class TimeSlot:
    activities: List[str] = field(default_factory=list)
    attractions: List[str] = field(default_factory=list)
    landmarks: Optional[List[str]] = None
    points_of_interest: Optional[List[str]] = None


@dataclass
class DaySchedule:
    morning: TimeSlot
    afternoon: TimeSlot
    evening: TimeSlot


@dataclass
class DayPlan:
    day: int
    theme: str
    activities: List[str] = field(default_factory=list)
    attractions: List[str] = field(default_factory=list)
    estimated_cost: Number = 0
    travel_tips: List[str] = field(default_factory=list)
    schedule: Optional[DaySchedule] = None


@dataclass
class ScheduledDay:
    """Day shape served by the simple planner: nested schedule plus nearby picks."""

    day: int
    theme: str
    schedule: DaySchedule
    estimated_cost_inr: Number
    travel_tips: List[str] = field(default_factory=list)
    nearby_recommendations: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Itinerary:
    destination: str
    duration: int
    total_estimated_cost: Number
    days: List[DayPlan] = field(default_factory=list)
    general_tips: List[str] = field(default_factory=list)


def to_payload(obj: Any) -> Dict[str, Any]:
    """Serialize a dataclass to JSON-ready data, leaving out unset optional fields."""

    return asdict(obj, dict_factory=_drop_none)
