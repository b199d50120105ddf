"""Runtime enemy models."""
from __future__ import annotations

from dataclasses import dataclass

from idlesim.domain.defs import EnemyDef


@dataclass(slots=True, frozen=True)
class Enemy:
    """A concrete enemy in a wave; boss mechanics create new instances instead of mutating."""

    type: str
    hp: float
    damage: float
    attack_speed: float
    name: str = ""

    @classmethod
    def from_def(cls, enemy_def: EnemyDef) -> "Enemy":
        return cls(
            type=enemy_def.id,
            hp=enemy_def.hp,
            damage=enemy_def.damage,
            attack_speed=enemy_def.attack_speed,
            name=enemy_def.name,
        )

    @property
    def display_name(self) -> str:
        return self.name or self.type
