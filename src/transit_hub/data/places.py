"""Static city lookup used when a trip request names a city without coordinates."""

from __future__ import annotations

from typing import Optional

from ..models.domain import Place

KOSOVO_CENTER: tuple[float, float] = (42.6026, 20.9030)

KOSOVO_CITIES: tuple[Place, ...] = (
    Place(name="Pristina", latitude=42.6629, longitude=21.1655),
    Place(name="Prizren", latitude=42.2139, longitude=20.7397),
    Place(name="Peja", latitude=42.6598, longitude=20.2888),
    Place(name="Mitrovica", latitude=42.8914, longitude=20.8660),
    Place(name="Gjakova", latitude=42.3803, longitude=20.4308),
    Place(name="Gjilan", latitude=42.4631, longitude=21.4691),
    Place(name="Ferizaj", latitude=42.3706, longitude=21.1553),
    Place(name="Podujeva", latitude=42.9098, longitude=21.1932),
    Place(name="Vushtrri", latitude=42.8273, longitude=20.9675),
    Place(name="Suhareka", latitude=42.3592, longitude=20.8254),
)

# Local spellings accepted by the lookup.
CITY_ALIASES = {
    "prishtina": "pristina",
    "prishtinë": "pristina",
    "pejë": "peja",
    "peć": "peja",
    "mitrovicë": "mitrovica",
    "gjakovë": "gjakova",
    "gjilani": "gjilan",
}


def resolve_place(name: str) -> Optional[Place]:
    """Return the known city matching ``name`` (case-insensitive), or None."""

    normalized = (name or "").strip().lower()
    if not normalized:
        return None
    normalized = CITY_ALIASES.get(normalized, normalized)
    for place in KOSOVO_CITIES:
        if place.name.lower() == normalized:
            return place
    return None
