"""Route catalog response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class StopModel(BaseModel):
    name: str
    coordinates: tuple[float, float]
    time_offset_minutes: int


class ScheduleEntryModel(BaseModel):
    first_departure_time: str
    frequency_minutes: int
    service_end_time: Optional[str] = None
    description: str = ""


class RouteModel(BaseModel):
    id: str
    name: str
    kind: str
    color: Optional[str] = None
    vehicle_number: str
    duration_minutes: int
    price_units: float
    capacity: int
    length_km: float
    stops: List[StopModel]
    schedule: List[ScheduleEntryModel]


class PlaceModel(BaseModel):
    name: str
    coordinates: tuple[float, float]
