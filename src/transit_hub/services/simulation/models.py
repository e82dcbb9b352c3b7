"""Simulation domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

OccupancyLevel = Literal["low", "medium", "high"]


@dataclass(slots=True)
class SegmentPosition:
    current_index: int
    next_index: int
    progress: float


@dataclass(slots=True)
class Telemetry:
    occupancy_count: int
    occupancy_level: OccupancyLevel
    delay_minutes: int


@dataclass(slots=True)
class VehicleState:
    id: str
    route_id: str
    route_name: str
    vehicle_number: str
    kind: str
    position: tuple[float, float]
    current_stop_name: str
    next_stop_name: str
    minutes_to_next_stop: int
    segment_progress: float
    occupancy_count: int
    occupancy_level: OccupancyLevel
    capacity: int
    delay_minutes: int
