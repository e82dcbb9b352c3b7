"""Synthetic occupancy and delay values standing in for real vehicle telemetry."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ...config import settings
from .models import OccupancyLevel, Telemetry


def occupancy_level(
    count: int,
    capacity: int,
    low_ratio: float = 0.3,
    medium_ratio: float = 0.7,
) -> OccupancyLevel:
    if count < capacity * low_ratio:
        return "low"
    if count < capacity * medium_ratio:
        return "medium"
    return "high"


class TelemetrySource:
    """Draws occupancy and delay from a seedable numpy generator."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        *,
        seed: Optional[int] = None,
        low_ratio: Optional[float] = None,
        medium_ratio: Optional[float] = None,
        delay_probability: Optional[float] = None,
        max_delay_minutes: Optional[int] = None,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.low_ratio = settings.occupancy_low_ratio if low_ratio is None else low_ratio
        self.medium_ratio = settings.occupancy_medium_ratio if medium_ratio is None else medium_ratio
        self.delay_probability = (
            settings.delay_probability if delay_probability is None else delay_probability
        )
        self.max_delay_minutes = (
            settings.max_delay_minutes if max_delay_minutes is None else max_delay_minutes
        )

    def sample(self, capacity: int) -> Telemetry:
        count = int(self.rng.integers(0, capacity))
        delayed = self.rng.random() < self.delay_probability
        delay = int(self.rng.integers(0, self.max_delay_minutes)) if delayed else 0
        return Telemetry(
            occupancy_count=count,
            occupancy_level=occupancy_level(count, capacity, self.low_ratio, self.medium_ratio),
            delay_minutes=delay,
        )
