"""Pentagon weapon/enemy type advantage table."""
from __future__ import annotations

from typing import Dict, Literal

WeaponType = Literal["spear", "sword", "bow", "crossbow", "wand"]
EnemyType = Literal[
    "slimes",
    "armored_insects",
    "predatory_beasts",
    "flying_predators",
    "venomous_crawlers",
    "living_plants",
]

WEAPON_TYPES: tuple[WeaponType, ...] = ("spear", "sword", "bow", "crossbow", "wand")
ENEMY_TYPES: tuple[EnemyType, ...] = (
    "slimes",
    "armored_insects",
    "predatory_beasts",
    "flying_predators",
    "venomous_crawlers",
    "living_plants",
)

ADVANTAGE_MULTIPLIER = 1.5
RESISTANCE_MULTIPLIER = 0.5
NEUTRAL_MULTIPLIER = 1.0

# Slimes appear in neither table and are neutral to every weapon.
WEAPON_ADVANTAGES: Dict[str, str] = {
    "spear": "armored_insects",
    "sword": "predatory_beasts",
    "bow": "flying_predators",
    "crossbow": "venomous_crawlers",
    "wand": "living_plants",
}

WEAPON_RESISTANCES: Dict[str, str] = {
    "spear": "living_plants",
    "sword": "flying_predators",
    "bow": "predatory_beasts",
    "crossbow": "armored_insects",
    "wand": "venomous_crawlers",
}


def has_advantage(weapon_type: str, enemy_type: str) -> bool:
    return WEAPON_ADVANTAGES[weapon_type] == enemy_type


def is_resisted(weapon_type: str, enemy_type: str) -> bool:
    return WEAPON_RESISTANCES[weapon_type] == enemy_type


def type_multiplier(weapon_type: str, enemy_type: str) -> float:
    """Return the damage multiplier for ``weapon_type`` hitting ``enemy_type``.

    Raises KeyError for a weapon type outside the table.
    """
    if has_advantage(weapon_type, enemy_type):
        return ADVANTAGE_MULTIPLIER
    if is_resisted(weapon_type, enemy_type):
        return RESISTANCE_MULTIPLIER
    return NEUTRAL_MULTIPLIER
