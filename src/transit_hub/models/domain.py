"""Domain models for transit lines and places."""

from dataclasses import dataclass
from typing import Literal, Optional

RouteKind = Literal["city", "intercity"]


@dataclass(slots=True, frozen=True)
class Stop:
    """A stop on a line, with minutes elapsed since the line's nominal start."""

    name: str
    latitude: float
    longitude: float
    time_offset_minutes: int

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(slots=True, frozen=True)
class ScheduleEntry:
    """One departure pattern (direction or shift) of a line."""

    first_departure_time: str
    frequency_minutes: int
    service_end_time: Optional[str] = None
    description: str = ""


@dataclass(slots=True, frozen=True)
class RouteDefinition:
    """Static definition of a transit line."""

    id: str
    name: str
    kind: RouteKind
    stops: tuple[Stop, ...]
    schedule: tuple[ScheduleEntry, ...]
    duration_minutes: int
    price_units: float
    vehicle_number: str
    capacity: int
    color: Optional[str] = None


@dataclass(slots=True, frozen=True)
class Place:
    """A named location supplied by the caller or the static city lookup."""

    name: str
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)
