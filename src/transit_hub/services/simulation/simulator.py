"""Derive live vehicle positions from static route definitions and a wall-clock time."""

from __future__ import annotations

import math
from datetime import datetime, time
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import RouteDefinition, Stop
from ..clock import coerce_time, minutes_of_day, parse_hhmm
from ..geospatial import interpolate
from .models import SegmentPosition, VehicleState
from .telemetry import TelemetrySource


def effective_frequency(route: RouteDefinition, default: Optional[int] = None) -> int:
    """Headway of the first schedule entry; later entries are not consulted.

    Catalog validation guarantees at least one schedule entry.
    """

    fallback = default if default is not None else settings.default_frequency_minutes
    frequency = route.schedule[0].frequency_minutes
    return frequency if frequency > 0 else fallback


def minutes_since_first_departure(route: RouteDefinition, now: time) -> int:
    """Signed minutes between the first departure and ``now``; no day wrap."""

    first = parse_hhmm(route.schedule[0].first_departure_time)
    return minutes_of_day(now) - minutes_of_day(first)


def vehicle_count(duration_minutes: int, frequency_minutes: int) -> int:
    """Vehicles simultaneously in transit for a headway and trip length."""

    return duration_minutes // frequency_minutes + 1


def vehicle_offset(elapsed: float, index: int, frequency_minutes: int, duration_minutes: int) -> float:
    # Python's modulo with a positive divisor already lands in [0, duration).
    return (elapsed + index * frequency_minutes) % duration_minutes


def locate_segment(stops: Sequence[Stop], offset: float) -> SegmentPosition:
    """Find the pair of stops surrounding ``offset`` on the route timeline."""

    for index, stop in enumerate(stops):
        if stop.time_offset_minutes == offset:
            return SegmentPosition(current_index=index, next_index=index, progress=0.0)
        if stop.time_offset_minutes > offset:
            current = max(index - 1, 0)
            start = stops[current].time_offset_minutes
            span = stop.time_offset_minutes - start
            progress = (offset - start) / span if span > 0 else 0.0
            return SegmentPosition(
                current_index=current,
                next_index=index,
                progress=min(max(progress, 0.0), 1.0),
            )
    last = len(stops) - 1
    return SegmentPosition(current_index=last, next_index=last, progress=0.0)


def minutes_to_next_stop(stops: Sequence[Stop], segment: SegmentPosition, offset: float) -> int:
    """ETA in whole minutes; never reports 0, which would read as already arrived."""

    start = stops[segment.current_index].time_offset_minutes
    end = stops[segment.next_index].time_offset_minutes
    remaining = end - offset
    span = end - start
    if span > 0:
        remaining %= span
    return max(math.ceil(remaining), 1)


def compute_active_vehicles(
    routes: Sequence[RouteDefinition],
    now: str | time | datetime,
    telemetry: Optional[TelemetrySource] = None,
    *,
    default_frequency: Optional[int] = None,
) -> list[VehicleState]:
    """Place every in-service vehicle of every route at ``now``."""

    clock = coerce_time(now)
    source = telemetry or TelemetrySource(seed=settings.telemetry_seed)
    vehicles: list[VehicleState] = []

    for route in routes:
        stops = route.stops
        frequency = effective_frequency(route, default_frequency)
        elapsed = minutes_since_first_departure(route, clock)

        for index in range(vehicle_count(route.duration_minutes, frequency)):
            offset = vehicle_offset(elapsed, index, frequency, route.duration_minutes)
            segment = locate_segment(stops, offset)
            current_stop = stops[segment.current_index]
            next_stop = stops[segment.next_index]
            sample = source.sample(route.capacity)

            vehicles.append(
                VehicleState(
                    id=f"{route.id}-bus-{index + 1}",
                    route_id=route.id,
                    route_name=route.name,
                    vehicle_number=route.vehicle_number,
                    kind=route.kind,
                    position=interpolate(current_stop.coordinates, next_stop.coordinates, segment.progress),
                    current_stop_name=current_stop.name,
                    next_stop_name=next_stop.name,
                    minutes_to_next_stop=minutes_to_next_stop(stops, segment, offset),
                    segment_progress=segment.progress,
                    occupancy_count=sample.occupancy_count,
                    occupancy_level=sample.occupancy_level,
                    capacity=route.capacity,
                    delay_minutes=sample.delay_minutes,
                )
            )
    return vehicles
