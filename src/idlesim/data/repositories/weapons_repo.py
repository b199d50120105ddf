"""Weapons repository."""
from __future__ import annotations

from typing import Dict

from idlesim.data.errors import DataValidationError
from idlesim.data.repositories.base import RepositoryBase
from idlesim.domain.defs import WeaponDef


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads level-scaled weapon stats."""

    def __init__(self, base_path=None) -> None:
        super().__init__("weapons.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        for raw_id, payload in raw.items():
            context = f"weapon '{raw_id}'"
            weapon_data = self._require_mapping(payload, context)
            self._assert_required(weapon_data, {"name", "attack_speed", "damage_by_level"}, context)
            levels = self._require_list(weapon_data["damage_by_level"], f"{context} damage_by_level")
            if not levels:
                raise DataValidationError(f"{context} damage_by_level must not be empty.")
            weapons[raw_id] = WeaponDef(
                id=raw_id,
                name=self._require_str(weapon_data["name"], f"{context} name"),
                attack_speed=self._require_number(weapon_data["attack_speed"], f"{context} attack_speed"),
                damage_by_level=tuple(
                    self._require_int(value, f"{context} damage_by_level[{index}]")
                    for index, value in enumerate(levels)
                ),
            )
        return weapons
