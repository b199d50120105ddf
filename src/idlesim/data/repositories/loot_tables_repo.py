"""Repository for loot tables keyed by route id."""
from __future__ import annotations

from typing import Dict, List

from idlesim.data.errors import DataValidationError
from idlesim.data.json_loader import load_json
from idlesim.data.repositories.base import RepositoryBase
from idlesim.domain.defs import LootDropDef, LootTableDef


class LootTablesRepository(RepositoryBase[LootTableDef]):
    """Loads loot table definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("loot_tables.json", base_path)

    def _load_raw(self) -> list[object]:
        raw = load_json(self._get_file_path())
        if not isinstance(raw, list):
            raise DataValidationError("loot_tables.json must be a list.")
        return raw

    def _build(self, raw: list[object]) -> Dict[str, LootTableDef]:
        tables: Dict[str, LootTableDef] = {}
        for index, entry in enumerate(raw):
            context = f"loot_tables[{index}]"
            table_map = self._require_mapping(entry, context)
            table_id = self._require_str(table_map.get("id"), f"{context}.id")
            drops: List[LootDropDef] = []
            for drop_index, drop_entry in enumerate(self._require_list(table_map.get("drops"), f"{context}.drops")):
                drop_ctx = f"{context}.drops[{drop_index}]"
                drop_map = self._require_mapping(drop_entry, drop_ctx)
                chance = self._require_number(drop_map.get("chance"), f"{drop_ctx}.chance")
                if not (0.0 <= chance <= 1.0):
                    raise DataValidationError(f"{drop_ctx}.chance must be between 0 and 1.")
                min_qty = self._require_int(drop_map.get("min_qty", 1), f"{drop_ctx}.min_qty")
                max_qty = self._require_int(drop_map.get("max_qty", min_qty), f"{drop_ctx}.max_qty")
                if min_qty <= 0 or max_qty < min_qty:
                    raise DataValidationError(f"{drop_ctx} quantity range invalid.")
                drops.append(
                    LootDropDef(
                        item=self._require_str(drop_map.get("item"), f"{drop_ctx}.item"),
                        chance=chance,
                        min_qty=min_qty,
                        max_qty=max_qty,
                    )
                )
            tables[table_id] = LootTableDef(id=table_id, drops=drops)
        return tables
