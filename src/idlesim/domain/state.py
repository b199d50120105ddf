"""Read-only snapshot of the external game-state store."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class ArmorState:
    defense: float = 0
    effect: str = "none"


@dataclass(slots=True)
class HeroState:
    """Hero level, weapon levels keyed by weapon type, and the single armor slot."""

    hero_level: int
    weapon_levels: Dict[str, int] = field(default_factory=dict)
    armor: ArmorState | None = None
