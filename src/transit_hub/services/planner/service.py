"""High-level orchestration for trip planning requests."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, time
from typing import Optional

from ...config import settings
from ...data.places import resolve_place
from ...models.domain import Place
from ...schemas.planner import EndpointModel, ItineraryModel, TripPlanRequest, TripPlanResponse
from ..clock import coerce_time, current_time, format_hhmm, minutes_of_day, parse_hhmm
from ..geospatial import haversine_km
from .base import PlanningStrategy, validate_itinerary
from .dispatcher import get_strategy
from .models import ItineraryOption


def plan_trip(
    origin: Place,
    destination: Place,
    now: str | time | datetime,
    strategy: Optional[PlanningStrategy] = None,
) -> list[ItineraryOption]:
    """Produce itinerary options departing at ``now``. Endpoint names are not validated."""

    planner = strategy or get_strategy(settings.planner_strategy)
    options = planner.plan(origin=origin, destination=destination, now=coerce_time(now))
    for option in options:
        validate_itinerary(option)
    return options


def _resolve_endpoint(endpoint: EndpointModel, role: str) -> Place:
    if endpoint.coordinates is not None:
        lat, lon = endpoint.coordinates
        return Place(name=endpoint.name, latitude=lat, longitude=lon)
    place = resolve_place(endpoint.name)
    if place is None:
        raise ValueError(f"No coordinates given for {role} '{endpoint.name}' and it is not a known city.")
    return Place(name=endpoint.name, latitude=place.latitude, longitude=place.longitude)


def plan_itineraries(payload: TripPlanRequest) -> TripPlanResponse:
    origin = _resolve_endpoint(payload.origin, "origin")
    destination = _resolve_endpoint(payload.destination, "destination")
    now = parse_hhmm(payload.at) if payload.at else current_time(settings.timezone)
    strategy_name = payload.strategy or settings.planner_strategy

    options = plan_trip(origin, destination, now, get_strategy(strategy_name))
    logging.info(
        f"Planned {len(options)} itineraries from '{origin.name}' to '{destination.name}' "
        f"at {format_hhmm(minutes_of_day(now))} using '{strategy_name}'"
    )

    return TripPlanResponse(
        origin=EndpointModel(name=origin.name, coordinates=origin.coordinates),
        destination=EndpointModel(name=destination.name, coordinates=destination.coordinates),
        metadata={
            "strategy": strategy_name,
            "anchor_time": format_hhmm(minutes_of_day(now)),
            "straight_line_km": round(
                haversine_km(origin.latitude, origin.longitude, destination.latitude, destination.longitude),
                2,
            ),
        },
        options=[ItineraryModel(**asdict(option)) for option in options],
    )
