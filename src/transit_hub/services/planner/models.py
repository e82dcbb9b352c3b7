"""Itinerary domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional

LegMode = Literal["walk", "transit"]


@dataclass(slots=True)
class Leg:
    id: str
    mode: LegMode
    name: str
    from_name: str
    to_name: str
    departure_time: str
    arrival_time: str
    leg_duration_minutes: int
    line_label: Optional[str] = None
    color: Optional[str] = None
    wait_minutes: int = 0


@dataclass(slots=True)
class ItineraryOption:
    id: str
    total_duration_minutes: int
    total_distance_km: float
    departure_time: str
    arrival_time: str
    price_units: float
    transfer_count: int
    co2_saved_kg: float
    legs: List[Leg]
