"""Enemy composition tables used for persistent enemy rolls."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class CompositionEntryDef:
    enemy_type: str
    weight: int
    min_count: int
    max_count: int


@dataclass(slots=True)
class CompositionDef:
    """Per-route enemy count ranges; ``boss_id`` tags Long rolls."""

    id: str
    entries: Tuple[CompositionEntryDef, ...]
    boss_id: str
