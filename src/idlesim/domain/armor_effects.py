"""Armor special effects applied at fixed points of the combat timeline.

Effects are looked up by name and resolved by pure functions. Each function
covers one timing point:

* ``apply_during_combat``: a single damage exchange (Reflection, Evasion,
  Type Resist, Critical Shield, Speed Boost)
* ``apply_between_waves``: a wave boundary (Regeneration)
* ``apply_on_kill``: after each kill (Vampiric)
* ``apply_on_completion``: once a run succeeds (Gold Magnet)

Only one armor is equipped at a time, so effects never stack.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from idlesim.core.rng import RNG


@dataclass(slots=True, frozen=True)
class ArmorEffectData:
    chance: float | None = None
    heal_amount: int = 0
    gold_multiplier: float = 1.0
    damage_reduction: float = 0.0
    reflect_percent: float = 0.0
    max_triggers_per_wave: int = 0
    speed_bonus: float = 1.0


ARMOR_EFFECTS: Dict[str, ArmorEffectData] = {
    "none": ArmorEffectData(),
    "Reflection": ArmorEffectData(chance=0.15, damage_reduction=0.30, reflect_percent=0.30),
    "Evasion": ArmorEffectData(chance=0.10, damage_reduction=1.0),
    "Gold Magnet": ArmorEffectData(gold_multiplier=1.25),
    "Regeneration": ArmorEffectData(heal_amount=3),
    "Type Resist": ArmorEffectData(chance=0.25, damage_reduction=0.40),
    "Speed Boost": ArmorEffectData(speed_bonus=1.2),
    "Critical Shield": ArmorEffectData(chance=0.20, damage_reduction=1.0),
    "Vampiric": ArmorEffectData(heal_amount=1, max_triggers_per_wave=5),
}

DURING_COMBAT_EFFECTS = frozenset({"Reflection", "Evasion", "Type Resist", "Critical Shield", "Speed Boost"})

_DESCRIPTIONS: Dict[str, str] = {
    "none": "No special effect",
    "Reflection": "15% chance to reflect 30% damage back to enemy",
    "Evasion": "10% chance to completely dodge an attack",
    "Gold Magnet": "+25% gold from this adventure",
    "Regeneration": "Heal 3 HP between waves",
    "Type Resist": "25% chance to take 40% less damage from an enemy",
    "Speed Boost": "+20% attack speed on the next fight after taking damage",
    "Critical Shield": "20% chance to absorb an attack completely",
    "Vampiric": "Heal 1 HP per enemy killed (max 5 per wave)",
}


@dataclass(slots=True)
class ArmorEffectResult:
    """Modifiers produced by one effect application."""

    damage_reduction: float = 0.0
    heal_amount: int = 0
    gold_bonus: int = 0
    message: str = ""
    reflected_damage: float = 0.0
    speed_bonus: float = 1.0

    @property
    def triggered(self) -> bool:
        return bool(self.message)

    def apply_to(self, damage: float) -> float:
        return damage * (1 - self.damage_reduction)


def is_known_effect(effect: str) -> bool:
    return effect in ARMOR_EFFECTS


def apply_during_combat(
    effect: str,
    incoming_damage: float,
    rng: RNG,
    enemy_type: str | None = None,
) -> ArmorEffectResult:
    """Roll a per-exchange effect against ``incoming_damage`` (already mitigated by defense)."""
    result = ArmorEffectResult()
    if effect not in DURING_COMBAT_EFFECTS:
        return result
    data = ARMOR_EFFECTS[effect]

    if effect == "Speed Boost":
        if incoming_damage > 0:
            result.speed_bonus = data.speed_bonus
            result.message = "Speed Boost: Attack speed increased for next enemy"
        return result

    if data.chance is not None and not rng.chance(data.chance):
        return result

    result.damage_reduction = data.damage_reduction
    if effect == "Reflection":
        result.reflected_damage = incoming_damage * data.reflect_percent
        result.message = f"Reflection: Reflected {result.reflected_damage:.1f} damage back"
    elif effect == "Evasion":
        result.message = "Evasion: Completely dodged the attack!"
    elif effect == "Critical Shield":
        result.message = "Critical Shield: Absorbed the attack!"
    else:
        result.message = f"Type Resist: Reduced damage from {enemy_type or 'enemy'}"
    return result


def apply_between_waves(effect: str) -> ArmorEffectResult:
    result = ArmorEffectResult()
    if effect == "Regeneration":
        result.heal_amount = ARMOR_EFFECTS["Regeneration"].heal_amount
        result.message = f"Regeneration: +{result.heal_amount} HP between waves"
    return result


def apply_on_kill(effect: str, kills_this_wave: int = 0) -> ArmorEffectResult:
    """Vampiric healing; ``kills_this_wave`` counts kills before this one."""
    result = ArmorEffectResult()
    if effect == "Vampiric":
        data = ARMOR_EFFECTS["Vampiric"]
        if kills_this_wave < data.max_triggers_per_wave:
            result.heal_amount = data.heal_amount
            result.message = f"Vampiric healing: +{result.heal_amount} HP"
    return result


def apply_on_completion(effect: str, base_gold: int) -> ArmorEffectResult:
    result = ArmorEffectResult()
    if effect == "Gold Magnet":
        multiplier = ARMOR_EFFECTS["Gold Magnet"].gold_multiplier
        result.gold_bonus = math.floor(base_gold * (multiplier - 1))
        result.message = f"Gold Magnet: +{result.gold_bonus} bonus gold"
    return result


def describe_effect(effect: str) -> str:
    return _DESCRIPTIONS.get(effect, "Unknown effect")
