"""Live vehicle feed request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class VehicleFeedRequest(BaseModel):
    at: Optional[str] = Field(
        default=None,
        pattern=r"^\d{1,2}:\d{2}$",
        description="Wall-clock time (HH:MM) to evaluate. Defaults to the service clock.",
    )
    route_ids: Optional[List[str]] = Field(default=None, description="Restrict the feed to these routes.")
    kind: Optional[Literal["city", "intercity"]] = None
    seed: Optional[int] = Field(default=None, description="Seed for synthesized occupancy/delay values.")
    include_geojson: bool = False


class VehicleModel(BaseModel):
    id: str
    route_id: str
    route_name: str
    vehicle_number: str
    kind: str
    position: tuple[float, float]
    current_stop_name: str
    next_stop_name: str
    minutes_to_next_stop: int
    segment_progress: float = Field(..., ge=0.0, le=1.0)
    occupancy_count: int
    occupancy_level: Literal["low", "medium", "high"]
    capacity: int
    delay_minutes: int


class VehicleFeedResponse(BaseModel):
    evaluated_at: str
    metadata: dict
    vehicles: List[VehicleModel]
