"""Shared type aliases for the core and domain layers."""
from typing import Literal

RouteLength = Literal["Short", "Medium", "Long"]
RollOutcome = Literal["complete", "failed", "abandoned"]

ROUTE_LENGTHS: tuple[RouteLength, ...] = ("Short", "Medium", "Long")

__all__ = ["ROUTE_LENGTHS", "RollOutcome", "RouteLength"]
