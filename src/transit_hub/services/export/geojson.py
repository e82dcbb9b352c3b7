"""GeoJSON map overlays for route polylines and vehicle markers."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from shapely.geometry import mapping

from ...models.domain import RouteDefinition
from ..geospatial import polyline_length_km, to_linestring, to_point
from ..simulation.models import VehicleState


def _feature(geometry: Any, properties: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "Feature", "geometry": mapping(geometry), "properties": properties}


def routes_to_geojson(routes: Sequence[RouteDefinition]) -> Dict[str, Any]:
    """One LineString feature per route; coordinates are emitted as [lon, lat]."""

    features: List[Dict[str, Any]] = []
    for route in routes:
        coords = [stop.coordinates for stop in route.stops]
        features.append(
            _feature(
                to_linestring(coords),
                {
                    "route_id": route.id,
                    "name": route.name,
                    "kind": route.kind,
                    "color": route.color,
                    "dashed": route.kind == "city",
                    "length_km": round(polyline_length_km(coords), 2),
                    "stops": [stop.name for stop in route.stops],
                },
            )
        )
    return {"type": "FeatureCollection", "features": features}


def vehicles_to_geojson(vehicles: Sequence[VehicleState]) -> Dict[str, Any]:
    features = [
        _feature(
            to_point(*vehicle.position),
            {
                "vehicle_id": vehicle.id,
                "route_id": vehicle.route_id,
                "vehicle_number": vehicle.vehicle_number,
                "current_stop": vehicle.current_stop_name,
                "next_stop": vehicle.next_stop_name,
                "minutes_to_next_stop": vehicle.minutes_to_next_stop,
                "occupancy_level": vehicle.occupancy_level,
                "delay_minutes": vehicle.delay_minutes,
            },
        )
        for vehicle in vehicles
    ]
    return {"type": "FeatureCollection", "features": features}
