"""Builds combat loadouts from the hero snapshot."""
from __future__ import annotations

import logging

from idlesim.data.repositories import WeaponsRepository
from idlesim.domain.armor_effects import is_known_effect
from idlesim.domain.entities import ArmorData, Loadout, WeaponData
from idlesim.domain.state import HeroState

logger = logging.getLogger(__name__)


class LoadoutService:
    """Converts weapon levels and the armor slot into combat-ready stats."""

    def __init__(self, weapons_repo: WeaponsRepository) -> None:
        self._weapons_repo = weapons_repo

    def build_weapon(self, weapon_type: str, level: int) -> WeaponData | None:
        if level <= 0 or not self._weapons_repo.has(weapon_type):
            return None
        weapon_def = self._weapons_repo.get(weapon_type)
        effective_level = min(level, weapon_def.max_level)
        if effective_level != level:
            logger.debug("Weapon %s level %d capped at %d", weapon_type, level, effective_level)
        damage = weapon_def.damage_at(effective_level)
        if damage is None:
            return None
        return WeaponData(
            type=weapon_type,
            damage=damage,
            attack_speed=weapon_def.attack_speed,
            level=effective_level,
        )

    def build_loadout(self, state: HeroState) -> Loadout:
        weapons = []
        for weapon_type, level in state.weapon_levels.items():
            weapon = self.build_weapon(weapon_type, level)
            if weapon is None:
                logger.debug("Skipping weapon %s at level %d", weapon_type, level)
                continue
            weapons.append(weapon)
        armor = None
        if state.armor is not None:
            effect = state.armor.effect
            if not is_known_effect(effect):
                logger.warning("Unknown armor effect %r treated as none", effect)
                effect = "none"
            armor = ArmorData(defense=state.armor.defense, effect=effect)
        return Loadout.of(weapons, armor)
