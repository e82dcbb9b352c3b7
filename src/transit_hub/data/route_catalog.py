"""Data access helpers for loading and validating the route catalog."""

from __future__ import annotations

import functools
import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, Optional

from ..config import settings
from ..models.domain import RouteDefinition, ScheduleEntry, Stop
from ..services.clock import parse_hhmm
from .kosovo_routes import CITY_ROUTES, INTERCITY_ROUTES, KIND_COLORS

_FREQUENCY_MINUTES = re.compile(r"every\s+(\d+)\s*min", re.IGNORECASE)
_FREQUENCY_HOURS = re.compile(r"every\s+(\d+)\s*h(?:ou)?rs?", re.IGNORECASE)
_SERVICE_END = re.compile(r"until\s+(\d{1,2}:\d{2})", re.IGNORECASE)


class CatalogError(ValueError):
    """Raised when a route definition violates catalog integrity rules."""


def parse_frequency_minutes(description: str, default: Optional[int] = None) -> int:
    """Extract the headway in minutes from text like ``"Every 30 mins until 22:00"``."""

    fallback = default if default is not None else settings.default_frequency_minutes
    text = description or ""
    match = _FREQUENCY_MINUTES.search(text)
    if match:
        minutes = int(match.group(1))
    elif (match := _FREQUENCY_HOURS.search(text)):
        minutes = int(match.group(1)) * 60
    elif "hourly" in text.lower():
        minutes = 60
    else:
        logging.debug(f"Unparseable frequency '{description}', using {fallback} minutes")
        return fallback
    return minutes if minutes > 0 else fallback


def parse_service_end(description: str) -> Optional[str]:
    match = _SERVICE_END.search(description or "")
    if not match:
        return None
    end = match.group(1)
    parse_hhmm(end)
    return end.zfill(5)


def _coerce_coordinates(value: Any, route_id: str) -> tuple[float, float]:
    try:
        lat, lon = value
        return float(lat), float(lon)
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Route '{route_id}' has invalid stop coordinates: {value!r}") from exc


def _schedule_from_dict(raw: dict, route_id: str) -> ScheduleEntry:
    departure = raw.get("departure_time") or raw.get("first_departure_time")
    if not departure:
        raise CatalogError(f"Route '{route_id}' has a schedule entry without a departure time")
    try:
        parse_hhmm(departure)
    except ValueError as exc:
        raise CatalogError(f"Route '{route_id}': {exc}") from exc

    description = raw.get("frequency", "") or ""
    frequency = raw.get("frequency_minutes")
    if frequency is None or int(frequency) <= 0:
        frequency = parse_frequency_minutes(description)
    return ScheduleEntry(
        first_departure_time=departure,
        frequency_minutes=int(frequency),
        service_end_time=raw.get("service_end_time") or parse_service_end(description),
        description=description,
    )


def _stop_from_dict(raw: dict, route_id: str) -> Stop:
    if not isinstance(raw, dict):
        raise CatalogError(f"Route '{route_id}' has a stop that is not a record: {raw!r}")
    if "time_offset" in raw:
        offset = raw["time_offset"]
    elif "time_offset_minutes" in raw:
        offset = raw["time_offset_minutes"]
    else:
        raise CatalogError(f"Route '{route_id}' stop '{raw.get('name', '?')}' has no time offset")
    lat, lon = _coerce_coordinates(raw.get("coordinates"), route_id)
    return Stop(
        name=str(raw["name"]),
        latitude=lat,
        longitude=lon,
        time_offset_minutes=int(offset),
    )


def route_from_dict(raw: dict) -> RouteDefinition:
    """Build a validated ``RouteDefinition`` from a catalog record."""

    route_id = str(raw.get("id") or "").strip()
    if not route_id:
        raise CatalogError("Route record is missing an 'id'")
    kind = raw.get("kind") or raw.get("type") or "intercity"
    if kind not in KIND_COLORS:
        raise CatalogError(f"Route '{route_id}' has unknown kind '{kind}'")

    try:
        stops = tuple(_stop_from_dict(stop, route_id) for stop in raw.get("stops", []))
        schedule = tuple(_schedule_from_dict(entry, route_id) for entry in raw.get("schedule", []))
        route = RouteDefinition(
            id=route_id,
            name=str(raw.get("name") or route_id),
            kind=kind,
            stops=stops,
            schedule=schedule,
            duration_minutes=int(raw.get("duration", raw.get("duration_minutes", 0))),
            price_units=float(raw.get("price", raw.get("price_units", 0.0))),
            vehicle_number=str(raw.get("vehicle_number") or raw.get("bus_number") or ""),
            capacity=int(raw.get("capacity", 0)),
            color=raw.get("color") or KIND_COLORS[kind],
        )
    except CatalogError:
        raise
    except KeyError as exc:
        raise CatalogError(f"Route '{route_id}' record is missing field {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Route '{route_id}' has an invalid value: {exc}") from exc
    validate_route(route)
    return route


def validate_route(route: RouteDefinition) -> None:
    """Reject routes the simulator cannot place vehicles on."""

    if len(route.stops) < 2:
        raise CatalogError(f"Route '{route.id}' needs at least 2 stops, has {len(route.stops)}")
    if route.stops[0].time_offset_minutes != 0:
        raise CatalogError(f"Route '{route.id}' first stop must have offset 0")
    offsets = [stop.time_offset_minutes for stop in route.stops]
    for previous, current in zip(offsets, offsets[1:]):
        if current < previous:
            raise CatalogError(f"Route '{route.id}' stop offsets are not non-decreasing: {offsets}")
    if route.duration_minutes <= 0:
        raise CatalogError(f"Route '{route.id}' duration must be positive")
    if offsets[-1] != route.duration_minutes:
        raise CatalogError(
            f"Route '{route.id}' last stop offset {offsets[-1]} does not match duration {route.duration_minutes}"
        )
    if route.capacity <= 0:
        raise CatalogError(f"Route '{route.id}' capacity must be positive")
    if not route.schedule:
        raise CatalogError(f"Route '{route.id}' has no schedule entries")


def _load_records(source: Optional[Path]) -> Iterable[dict]:
    if source is None:
        return [*INTERCITY_ROUTES, *CITY_ROUTES]
    if not source.exists():
        raise FileNotFoundError(f"Route catalog file not found: {source}")
    with source.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    records = payload.get("routes") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise CatalogError(f"Route catalog '{source}' must contain a list of routes")
    return records


@functools.lru_cache(maxsize=1)
def load_routes(source: Optional[Path] = None) -> tuple[RouteDefinition, ...]:
    """Load and validate the route catalog (configured file or built-in data)."""

    records = _load_records(source or settings.catalog_file)
    routes = tuple(route_from_dict(record) for record in records)
    seen: set[str] = set()
    for route in routes:
        if route.id in seen:
            raise CatalogError(f"Duplicate route id '{route.id}' in catalog")
        seen.add(route.id)
    logging.info(f"Loaded {len(routes)} routes into the catalog")
    return routes


def get_all_routes() -> list[RouteDefinition]:
    return list(load_routes())


def get_route_by_id(route_id: str) -> Optional[RouteDefinition]:
    return next((route for route in load_routes() if route.id == route_id), None)


def get_routes_by_kind(kind: str) -> list[RouteDefinition]:
    return [route for route in load_routes() if route.kind == kind]
