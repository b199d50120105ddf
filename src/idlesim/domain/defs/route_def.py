"""Route catalog definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from idlesim.core.types import RouteLength


@dataclass(slots=True)
class RouteDef:
    """Static catalog data for one adventure route."""

    id: str
    name: str
    boss_id: str
    enemy_types: Tuple[str, ...]
    base_wave_size: int
    wave_counts: Dict[str, int] = field(default_factory=dict)
    gold_gain: Dict[str, int] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class RouteConfig:
    """A route resolved for a specific length, ready to be simulated."""

    id: str
    length: RouteLength
    wave_count: int
    boss: str
    gold_gain: int
    xp_gain: int

    @property
    def target(self) -> str:
        return f"{self.id}_{self.length.lower()}"
