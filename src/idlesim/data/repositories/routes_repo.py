"""Route catalog repository."""
from __future__ import annotations

from typing import Dict

from idlesim.core.types import ROUTE_LENGTHS
from idlesim.data.errors import DataReferenceError, DataValidationError
from idlesim.data.repositories.base import RepositoryBase
from idlesim.data.repositories.bosses_repo import BossesRepository
from idlesim.data.repositories.enemies_repo import EnemiesRepository
from idlesim.domain.defs import RouteDef


class RoutesRepository(RepositoryBase[RouteDef]):
    """Loads route definitions and validates their references."""

    def __init__(
        self,
        base_path=None,
        *,
        bosses_repo: BossesRepository | None = None,
        enemies_repo: EnemiesRepository | None = None,
    ) -> None:
        super().__init__("routes.json", base_path)
        self._bosses_repo = bosses_repo
        self._enemies_repo = enemies_repo

    def _build(self, raw: dict[str, object]) -> Dict[str, RouteDef]:
        routes: Dict[str, RouteDef] = {}
        for raw_id, payload in raw.items():
            context = f"route '{raw_id}'"
            route_data = self._require_mapping(payload, context)
            self._assert_required(route_data, {"name", "boss_id", "enemy_types"}, context)
            enemy_types = tuple(self._require_str_list(route_data["enemy_types"], f"{context} enemy_types"))
            if not enemy_types:
                raise DataValidationError(f"{context} enemy_types must not be empty.")
            base_wave_size = self._require_int(route_data.get("base_wave_size", 2), f"{context} base_wave_size")
            if base_wave_size < 1:
                raise DataValidationError(f"{context} base_wave_size must be at least 1.")
            route = RouteDef(
                id=raw_id,
                name=self._require_str(route_data["name"], f"{context} name"),
                boss_id=self._require_str(route_data["boss_id"], f"{context} boss_id"),
                enemy_types=enemy_types,
                base_wave_size=base_wave_size,
                wave_counts=self._parse_length_table(route_data.get("wave_counts", {}), f"{context} wave_counts"),
                gold_gain=self._parse_length_table(route_data.get("gold_gain", {}), f"{context} gold_gain"),
            )
            self._validate_references(route, context)
            routes[raw_id] = route
        return routes

    def _parse_length_table(self, value: object, context: str) -> Dict[str, int]:
        table = self._require_mapping(value, context)
        result: Dict[str, int] = {}
        for length, amount in table.items():
            if length not in ROUTE_LENGTHS:
                raise DataValidationError(f"{context} has unknown length '{length}'.")
            result[length] = self._require_int(amount, f"{context}.{length}")
        return result

    def _validate_references(self, route: RouteDef, context: str) -> None:
        if self._bosses_repo is not None and not self._bosses_repo.has(route.boss_id):
            raise DataReferenceError(f"{context} references missing boss '{route.boss_id}'.")
        if self._enemies_repo is not None:
            for enemy_type in route.enemy_types:
                if not self._enemies_repo.has(enemy_type):
                    raise DataReferenceError(f"{context} references missing enemy type '{enemy_type}'.")
