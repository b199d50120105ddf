"""Equipped-item snapshots read from the game-state store."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable


@dataclass(slots=True, frozen=True)
class WeaponData:
    type: str
    damage: float
    attack_speed: float
    level: int = 1


@dataclass(slots=True, frozen=True)
class ArmorData:
    """Single armor slot: defense points (reduction capped at 80%) and an effect name."""

    defense: float = 0
    effect: str = "none"


@dataclass(slots=True)
class Loadout:
    """Weapons keyed by weapon type in equip order, plus at most one armor."""

    weapons: Dict[str, WeaponData] = field(default_factory=dict)
    armor: ArmorData | None = None

    @classmethod
    def of(cls, weapons: Iterable[WeaponData], armor: ArmorData | None = None) -> "Loadout":
        return cls(weapons={weapon.type: weapon for weapon in weapons}, armor=armor)

    @property
    def has_weapons(self) -> bool:
        return bool(self.weapons)

    @property
    def armor_effect(self) -> str:
        return self.armor.effect if self.armor is not None else "none"
