"""Boss definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True, frozen=True)
class BossCounterDef:
    """Gear that counters a boss and the penalties applied without it.

    A counter is satisfied when every requirement that is set holds.
    Penalty percentages are fractions of the hero's max HP.
    """

    description: str
    encourages: str
    weapon: str | None = None
    armor_effect: str | None = None
    min_defense: float | None = None
    bonus_damage_pct: float = 0.0
    duration_multiplier: float = 1.0
    unavoidable_pct: float = 0.0


@dataclass(slots=True)
class BossDef:
    """Boss catalog entry plus the parameters of its unique mechanic."""

    id: str
    name: str
    hp: int
    damage: int
    attack_speed: float
    quirk: str
    mechanic: str
    counter: BossCounterDef
    weakness: str | None = None
    weakness_multiplier: float = 1.5
    mechanic_params: Dict[str, float] = field(default_factory=dict)
    gold_reward: int = 50
    xp_reward: int = 20

    def param(self, name: str, default: float) -> float:
        return self.mechanic_params.get(name, default)
