"""Catalog read services used by the HTTP layer."""

from __future__ import annotations

from typing import Optional

from ..data.places import KOSOVO_CITIES
from ..data.route_catalog import get_all_routes, get_route_by_id, get_routes_by_kind
from ..models.domain import RouteDefinition
from ..schemas.catalog import PlaceModel, RouteModel, ScheduleEntryModel, StopModel
from .geospatial import polyline_length_km


def route_to_model(route: RouteDefinition) -> RouteModel:
    return RouteModel(
        id=route.id,
        name=route.name,
        kind=route.kind,
        color=route.color,
        vehicle_number=route.vehicle_number,
        duration_minutes=route.duration_minutes,
        price_units=route.price_units,
        capacity=route.capacity,
        length_km=round(polyline_length_km([stop.coordinates for stop in route.stops]), 2),
        stops=[
            StopModel(name=stop.name, coordinates=stop.coordinates, time_offset_minutes=stop.time_offset_minutes)
            for stop in route.stops
        ],
        schedule=[
            ScheduleEntryModel(
                first_departure_time=entry.first_departure_time,
                frequency_minutes=entry.frequency_minutes,
                service_end_time=entry.service_end_time,
                description=entry.description,
            )
            for entry in route.schedule
        ],
    )


def list_routes(kind: Optional[str] = None) -> list[RouteModel]:
    routes = get_routes_by_kind(kind) if kind else get_all_routes()
    return [route_to_model(route) for route in routes]


def find_route(route_id: str) -> Optional[RouteModel]:
    route = get_route_by_id(route_id)
    return route_to_model(route) if route else None


def list_places() -> list[PlaceModel]:
    return [PlaceModel(name=place.name, coordinates=place.coordinates) for place in KOSOVO_CITIES]
