"""Export services."""

from .geojson import routes_to_geojson, vehicles_to_geojson

__all__ = [
    "routes_to_geojson",
    "vehicles_to_geojson",
]
