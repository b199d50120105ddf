"""Loot table definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(slots=True)
class LootDropDef:
    item: str
    chance: float
    min_qty: int = 1
    max_qty: int = 1


@dataclass(slots=True)
class LootTableDef:
    """Loot table keyed by route id."""

    id: str
    drops: List[LootDropDef]
