"""Factory for planner strategies based on configuration or request selection."""

from __future__ import annotations

from .base import PlanningStrategy
from .templates import TemplatePlanner


def get_strategy(name: str) -> PlanningStrategy:
    match name:
        case "template":
            return TemplatePlanner()
        case _:
            raise ValueError(f"Unknown planner strategy '{name}'.")
