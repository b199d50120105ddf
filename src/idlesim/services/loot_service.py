"""Loot rolls for completed adventures."""
from __future__ import annotations

from typing import List

from idlesim.core.rng import RNG
from idlesim.data.repositories import LootTablesRepository
from idlesim.domain.defs import LootTableDef

DEFAULT_TABLE_ID = "default"
BONUS_ARMOR_CHANCE = 0.3
BONUS_ARMOR_ITEM = "Random Armor Piece"


class LootService:
    """Rolls each route drop independently, then the bonus armor piece."""

    def __init__(self, loot_tables_repo: LootTablesRepository) -> None:
        self._loot_tables_repo = loot_tables_repo

    def table_for(self, route_id: str) -> LootTableDef:
        if self._loot_tables_repo.has(route_id):
            return self._loot_tables_repo.get(route_id)
        return self._loot_tables_repo.get(DEFAULT_TABLE_ID)

    def roll(self, route_id: str, rng: RNG) -> List[str]:
        loot: List[str] = []
        for drop in self.table_for(route_id).drops:
            if rng.chance(drop.chance):
                quantity = rng.randint(drop.min_qty, drop.max_qty)
                loot.append(f"{drop.item} x{quantity}")
        if rng.chance(BONUS_ARMOR_CHANCE):
            loot.append(BONUS_ARMOR_ITEM)
        return loot
