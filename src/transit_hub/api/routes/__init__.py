"""Route group exports."""

from . import catalog, health, planner, vehicles

__all__ = ["catalog", "health", "planner", "vehicles"]
