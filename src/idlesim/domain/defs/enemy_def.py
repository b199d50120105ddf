"""Enemy base-stat definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EnemyDef:
    """Base stats for one enemy type; waves copy these verbatim."""

    id: str
    name: str
    hp: int
    damage: int
    attack_speed: float
