"""Live vehicle feed orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Optional, Sequence

from ...config import settings
from ...data.route_catalog import load_routes
from ...models.domain import RouteDefinition
from ...schemas.vehicles import VehicleFeedRequest, VehicleFeedResponse, VehicleModel
from ..clock import current_time, format_hhmm, minutes_of_day, parse_hhmm
from ..export.geojson import vehicles_to_geojson
from .simulator import compute_active_vehicles, effective_frequency
from .telemetry import TelemetrySource


def _filter_routes(
    routes: Sequence[RouteDefinition],
    route_ids: Optional[Sequence[str]],
    kind: Optional[str],
) -> list[RouteDefinition]:
    selected = list(routes)
    if route_ids:
        id_set = {rid.strip() for rid in route_ids}
        unknown = id_set - {route.id for route in selected}
        if unknown:
            raise ValueError(f"Unknown route ids: {', '.join(sorted(unknown))}")
        selected = [route for route in selected if route.id in id_set]
    if kind:
        selected = [route for route in selected if route.kind == kind]
    return selected


def simulate_fleet(payload: VehicleFeedRequest) -> VehicleFeedResponse:
    """Evaluate the simulator for the requested time and route selection."""

    now = parse_hhmm(payload.at) if payload.at else current_time(settings.timezone)
    routes = _filter_routes(load_routes(), payload.route_ids, payload.kind)
    seed = payload.seed if payload.seed is not None else settings.telemetry_seed

    vehicles = compute_active_vehicles(routes, now, TelemetrySource(seed=seed))
    evaluated_at = format_hhmm(minutes_of_day(now))

    per_route: dict[str, int] = {}
    for vehicle in vehicles:
        per_route[vehicle.route_id] = per_route.get(vehicle.route_id, 0) + 1
    logging.info(f"Simulated {len(vehicles)} vehicles on {len(routes)} routes at {evaluated_at}")

    metadata: dict = {
        "route_count": len(routes),
        "vehicle_count": len(vehicles),
        "vehicles_per_route": per_route,
        "frequency_minutes": {route.id: effective_frequency(route) for route in routes},
        "refresh_seconds": settings.feed_refresh_seconds,
    }
    if payload.include_geojson:
        metadata["map_overlays"] = {"vehicles": vehicles_to_geojson(vehicles)}

    return VehicleFeedResponse(
        evaluated_at=evaluated_at,
        metadata=metadata,
        vehicles=[VehicleModel(**asdict(vehicle)) for vehicle in vehicles],
    )
