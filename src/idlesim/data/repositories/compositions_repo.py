"""Repository for per-route enemy composition tables."""
from __future__ import annotations

from typing import Dict

from idlesim.data.errors import DataValidationError
from idlesim.data.repositories.base import RepositoryBase
from idlesim.domain.defs import CompositionDef, CompositionEntryDef


class CompositionsRepository(RepositoryBase[CompositionDef]):
    """Loads the count ranges used to roll persistent enemy compositions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enemy_compositions.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CompositionDef]:
        compositions: Dict[str, CompositionDef] = {}
        for route_id, payload in raw.items():
            context = f"composition '{route_id}'"
            composition = self._require_mapping(payload, context)
            entries = []
            for index, entry in enumerate(self._require_list(composition.get("enemies"), f"{context}.enemies")):
                entry_ctx = f"{context}.enemies[{index}]"
                entry_map = self._require_mapping(entry, entry_ctx)
                self._assert_required(entry_map, {"enemy_type", "weight", "min", "max"}, entry_ctx)
                min_count = self._require_int(entry_map["min"], f"{entry_ctx}.min")
                max_count = self._require_int(entry_map["max"], f"{entry_ctx}.max")
                if min_count < 0 or max_count < min_count:
                    raise DataValidationError(f"{entry_ctx} count range invalid.")
                weight = self._require_int(entry_map["weight"], f"{entry_ctx}.weight")
                if not (0 <= weight <= 100):
                    raise DataValidationError(f"{entry_ctx}.weight must be between 0 and 100.")
                entries.append(
                    CompositionEntryDef(
                        enemy_type=self._require_str(entry_map["enemy_type"], f"{entry_ctx}.enemy_type"),
                        weight=weight,
                        min_count=min_count,
                        max_count=max_count,
                    )
                )
            compositions[route_id] = CompositionDef(
                id=route_id,
                entries=tuple(entries),
                boss_id=self._require_str(composition.get("boss_id", "mysterious_boss"), f"{context}.boss_id"),
            )
        return compositions
