"""Counter/penalty fallback for bosses fought without their designated counter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from idlesim.domain.defs import BossDef
from idlesim.domain.entities import ArmorData, WeaponData


@dataclass(slots=True, frozen=True)
class BossPenalties:
    bonus_damage: float = 0.0
    duration_multiplier: float = 1.0
    unavoidable_damage: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.bonus_damage == 0 and self.duration_multiplier == 1.0 and self.unavoidable_damage == 0


NO_PENALTIES = BossPenalties()


def has_counter(boss: BossDef, weapons: Mapping[str, WeaponData], armor: ArmorData | None) -> bool:
    counter = boss.counter
    if counter.weapon is not None and counter.weapon not in weapons:
        return False
    if counter.armor_effect is not None and (armor is None or armor.effect != counter.armor_effect):
        return False
    if counter.min_defense is not None and (armor is None or armor.defense < counter.min_defense):
        return False
    return True


def calculate_penalties(
    boss: BossDef,
    weapons: Mapping[str, WeaponData],
    armor: ArmorData | None,
    max_hp: int,
) -> BossPenalties:
    if has_counter(boss, weapons, armor):
        return NO_PENALTIES
    counter = boss.counter
    return BossPenalties(
        bonus_damage=max_hp * counter.bonus_damage_pct,
        duration_multiplier=counter.duration_multiplier,
        unavoidable_damage=max_hp * counter.unavoidable_pct,
    )


def recommendation(boss: BossDef) -> str:
    return f"{boss.counter.description} - {boss.counter.encourages}"
