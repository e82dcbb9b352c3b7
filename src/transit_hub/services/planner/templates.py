"""Template-based trip planner.

Three canned itineraries parameterized by the departure anchor and the
endpoint names. Offsets are minutes after the anchor. A transit leg starts
when the traveller reaches the boarding point (``board``) and the vehicle
leaves at ``depart``; the gap is reported as ``wait_minutes`` and counted in
the leg duration so consecutive legs chain without gaps.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ...models.domain import Place
from ..clock import format_hhmm, minutes_of_day
from .base import PlanningStrategy
from .models import ItineraryOption, Leg, LegMode


@dataclass(slots=True, frozen=True)
class LegTemplate:
    mode: LegMode
    name: str
    board: int
    depart: int
    arrive: int
    from_name: Optional[str] = None  # None: the trip origin
    to_name: Optional[str] = None  # None: the trip destination
    line_label: Optional[str] = None
    color: Optional[str] = None


@dataclass(slots=True, frozen=True)
class ItineraryTemplate:
    id: str
    distance_km: float
    price_units: float
    co2_saved_kg: float
    legs: tuple[LegTemplate, ...]


DEFAULT_TEMPLATES: tuple[ItineraryTemplate, ...] = (
    ItineraryTemplate(
        id="option-1",
        distance_km=12,
        price_units=2.0,
        co2_saved_kg=2.4,
        legs=(
            LegTemplate("transit", "City Bus Line 1", board=0, depart=0, arrive=15,
                        to_name="City Center", line_label="1", color="#10B981"),
            LegTemplate("transit", "City Bus Line 3", board=15, depart=20, arrive=45,
                        from_name="City Center", line_label="3", color="#3B82F6"),
        ),
    ),
    ItineraryTemplate(
        id="option-2",
        distance_km=10,
        price_units=1.5,
        co2_saved_kg=2.0,
        legs=(
            LegTemplate("transit", "City Bus Line 2", board=0, depart=0, arrive=55,
                        line_label="2", color="#EC4899"),
        ),
    ),
    ItineraryTemplate(
        id="option-3",
        distance_km=15,
        price_units=3.0,
        co2_saved_kg=3.0,
        legs=(
            LegTemplate("walk", "Walk", board=10, depart=10, arrive=15, to_name="Main Station"),
            LegTemplate("transit", "Express Bus", board=15, depart=20, arrive=50,
                        from_name="Main Station", line_label="E1", color="#F59E0B"),
        ),
    ),
)


def build_itinerary(template: ItineraryTemplate, origin: Place, destination: Place, anchor: int) -> ItineraryOption:
    legs = [
        Leg(
            id=f"{template.id}-leg-{index}",
            mode=leg.mode,
            name=leg.name,
            from_name=origin.name if leg.from_name is None else leg.from_name,
            to_name=destination.name if leg.to_name is None else leg.to_name,
            departure_time=format_hhmm(anchor + leg.board),
            arrival_time=format_hhmm(anchor + leg.arrive),
            leg_duration_minutes=leg.arrive - leg.board,
            line_label=leg.line_label if leg.mode == "transit" else None,
            color=leg.color if leg.mode == "transit" else None,
            wait_minutes=leg.depart - leg.board,
        )
        for index, leg in enumerate(template.legs, start=1)
    ]
    return ItineraryOption(
        id=template.id,
        total_duration_minutes=sum(leg.leg_duration_minutes for leg in legs),
        total_distance_km=template.distance_km,
        departure_time=legs[0].departure_time,
        arrival_time=legs[-1].arrival_time,
        price_units=template.price_units,
        transfer_count=len(legs) - 1,
        co2_saved_kg=template.co2_saved_kg,
        legs=legs,
    )


class TemplatePlanner(PlanningStrategy):
    """Return a fixed set of itineraries anchored at the request time."""

    name = "template"

    def __init__(self, templates: tuple[ItineraryTemplate, ...] = DEFAULT_TEMPLATES) -> None:
        self.templates = templates

    def plan(self, *, origin: Place, destination: Place, now: time) -> list[ItineraryOption]:
        anchor = minutes_of_day(now)
        return [build_itinerary(template, origin, destination, anchor) for template in self.templates]
