"""Trip planning request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class EndpointModel(BaseModel):
    name: str = ""
    coordinates: Optional[tuple[float, float]] = Field(
        default=None,
        description="(lat, lon). Resolved from the static city lookup when omitted.",
    )


class TripPlanRequest(BaseModel):
    origin: EndpointModel
    destination: EndpointModel
    at: Optional[str] = Field(
        default=None,
        pattern=r"^\d{1,2}:\d{2}$",
        description="Departure anchor (HH:MM). Defaults to the service clock.",
    )
    strategy: Optional[str] = Field(default=None, description="Planner strategy name.")


class LegModel(BaseModel):
    id: str
    mode: Literal["walk", "transit"]
    name: str
    line_label: Optional[str] = None
    color: Optional[str] = None
    from_name: str
    to_name: str
    departure_time: str
    arrival_time: str
    leg_duration_minutes: int
    wait_minutes: int = 0


class ItineraryModel(BaseModel):
    id: str
    total_duration_minutes: int
    total_distance_km: float
    departure_time: str
    arrival_time: str
    price_units: float
    transfer_count: int
    co2_saved_kg: float
    legs: List[LegModel]


class TripPlanResponse(BaseModel):
    origin: EndpointModel
    destination: EndpointModel
    metadata: dict
    options: List[ItineraryModel]
