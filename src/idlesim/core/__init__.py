"""Core primitives shared by every layer."""

from .rng import RNG
from .types import ROUTE_LENGTHS, RollOutcome, RouteLength

__all__ = ["RNG", "ROUTE_LENGTHS", "RollOutcome", "RouteLength"]
