"""Base classes for trip planning strategy implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time

from ...models.domain import Place
from .models import ItineraryOption


class PlanningStrategy(ABC):
    """Contract for planner implementations."""

    name: str = ""

    @abstractmethod
    def plan(
        self,
        *,
        origin: Place,
        destination: Place,
        now: time,
    ) -> list[ItineraryOption]:
        raise NotImplementedError


def validate_itinerary(option: ItineraryOption) -> None:
    """Raise ValueError when legs do not chain or aggregates disagree with them."""

    if not option.legs:
        raise ValueError(f"Itinerary '{option.id}' has no legs")
    for previous, following in zip(option.legs, option.legs[1:]):
        if previous.arrival_time != following.departure_time:
            raise ValueError(
                f"Itinerary '{option.id}': leg '{previous.id}' arrives {previous.arrival_time} "
                f"but '{following.id}' departs {following.departure_time}"
            )
    if option.legs[0].departure_time != option.departure_time:
        raise ValueError(f"Itinerary '{option.id}' departure does not match its first leg")
    if option.legs[-1].arrival_time != option.arrival_time:
        raise ValueError(f"Itinerary '{option.id}' arrival does not match its last leg")
    total = sum(leg.leg_duration_minutes for leg in option.legs)
    if total != option.total_duration_minutes:
        raise ValueError(
            f"Itinerary '{option.id}' legs sum to {total} min, total is {option.total_duration_minutes}"
        )
    if option.transfer_count != len(option.legs) - 1:
        raise ValueError(f"Itinerary '{option.id}' transfer count does not match its legs")
