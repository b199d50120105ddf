"""Enemies repository."""
from __future__ import annotations

from typing import Dict

from idlesim.data.errors import DataValidationError
from idlesim.data.repositories.base import RepositoryBase
from idlesim.domain.defs import EnemyDef


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads and validates base stats for each enemy type."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, payload in raw.items():
            context = f"enemy '{raw_id}'"
            enemy_data = self._require_mapping(payload, context)
            self._assert_required(enemy_data, {"name", "hp", "damage", "attack_speed"}, context)
            hp = self._require_int(enemy_data["hp"], f"{context} hp")
            attack_speed = self._require_number(enemy_data["attack_speed"], f"{context} attack_speed")
            if hp <= 0 or attack_speed < 0:
                raise DataValidationError(f"{context} must have positive hp and non-negative attack_speed.")
            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                hp=hp,
                damage=self._require_int(enemy_data["damage"], f"{context} damage"),
                attack_speed=attack_speed,
            )
        return enemies
