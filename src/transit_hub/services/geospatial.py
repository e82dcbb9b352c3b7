"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import LineString, Point

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def interpolate(
    start: tuple[float, float],
    end: tuple[float, float],
    progress: float,
) -> tuple[float, float]:
    """Linearly interpolate latitude and longitude independently between two points."""

    return (
        start[0] + progress * (end[0] - start[0]),
        start[1] + progress * (end[1] - start[1]),
    )


def polyline_length_km(coords: Sequence[tuple[float, float]]) -> float:
    """Sum of great-circle distances along (lat, lon) pairs."""

    return sum(
        haversine_km(a[0], a[1], b[0], b[1])
        for a, b in zip(coords, coords[1:])
    )


def to_linestring(coords: Sequence[tuple[float, float]]) -> LineString:
    """Build a shapely line from (lat, lon) pairs; shapely works in (x=lon, y=lat)."""

    return LineString([(lon, lat) for lat, lon in coords])


def to_point(lat: float, lon: float) -> Point:
    return Point(lon, lat)
