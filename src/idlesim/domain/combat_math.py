"""Closed-form continuous-time combat resolution.

An exchange is not simulated hit by hit: the hero's damage per second decides
how long the enemy survives, and the enemy deals its own damage per second
for exactly that long.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping

from idlesim.core.rng import RNG
from idlesim.domain.armor_effects import ArmorEffectResult, apply_during_combat
from idlesim.domain.entities import ArmorData, Enemy, WeaponData
from idlesim.domain.matchups import has_advantage, is_resisted, type_multiplier

BASE_HERO_HP = 100
HP_PER_LEVEL = 20
MAX_ARMOR_REDUCTION = 0.8


def hero_max_hp(level: int) -> int:
    if level < 0:
        raise ValueError(f"Hero level must be non-negative, got {level}.")
    return BASE_HERO_HP + level * HP_PER_LEVEL


def select_weapon(weapons: Mapping[str, WeaponData], enemy_type: str) -> WeaponData | None:
    """Pick an advantaged weapon, else one that is not resisted, else the first equipped."""
    if not weapons:
        return None
    for weapon_type, weapon in weapons.items():
        if has_advantage(weapon_type, enemy_type):
            return weapon
    for weapon_type, weapon in weapons.items():
        if not is_resisted(weapon_type, enemy_type):
            return weapon
    return next(iter(weapons.values()))


def weapon_dps(weapon: WeaponData, speed_bonus: float = 1.0) -> float:
    return weapon.damage * weapon.attack_speed * speed_bonus


def effective_damage(weapon: WeaponData, enemy_type: str, speed_bonus: float = 1.0) -> float:
    return weapon_dps(weapon, speed_bonus) * type_multiplier(weapon.type, enemy_type)


def time_to_kill(hp: float, dps: float) -> float:
    if dps <= 0:
        raise ValueError(f"Damage per second must be positive, got {dps}.")
    return hp / dps


def incoming_damage(damage: float, attack_speed: float, duration: float) -> float:
    return damage * attack_speed * duration


def armor_reduction(defense: float) -> float:
    """Fraction of damage removed by ``defense``; saturates at 80% from 80 defense up."""
    return min(MAX_ARMOR_REDUCTION, max(0.0, defense) / 100)


def mitigate(raw_damage: float, armor: ArmorData | None) -> float:
    if armor is None or armor.defense <= 0:
        return raw_damage
    return raw_damage * (1 - armor_reduction(armor.defense))


@dataclass(slots=True)
class ExchangeResult:
    """Outcome of one hero-vs-enemy exchange."""

    weapon_type: str
    dps: float
    time_to_kill: float
    raw_damage: float
    mitigated_damage: float
    final_damage: float
    effect: ArmorEffectResult = field(default_factory=ArmorEffectResult)

    @property
    def hp_lost(self) -> int:
        return math.ceil(self.final_damage)


def resolve_exchange(
    weapon: WeaponData,
    enemy: Enemy,
    armor: ArmorData | None,
    rng: RNG,
    *,
    speed_bonus: float = 1.0,
) -> ExchangeResult:
    dps = effective_damage(weapon, enemy.type, speed_bonus)
    duration = time_to_kill(enemy.hp, dps)
    raw = incoming_damage(enemy.damage, enemy.attack_speed, duration)
    mitigated = mitigate(raw, armor)
    effect = ArmorEffectResult()
    if armor is not None and armor.effect != "none":
        effect = apply_during_combat(armor.effect, mitigated, rng, enemy.type)
    return ExchangeResult(
        weapon_type=weapon.type,
        dps=dps,
        time_to_kill=duration,
        raw_damage=raw,
        mitigated_damage=mitigated,
        final_damage=effect.apply_to(mitigated),
        effect=effect,
    )
