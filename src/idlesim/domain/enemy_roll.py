"""Persistent enemy roll models."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class RollEntry:
    enemy_type: str
    count: int
    percentage: float
    is_boss: bool = False


@dataclass(slots=True)
class EnemyRoll:
    """Enemy composition rolled for one (route, difficulty) key."""

    timestamp: float
    entries: List[RollEntry] = field(default_factory=list)
    total_enemies: int = 0
    roll_seed: int = 0

    @property
    def boss_entries(self) -> List[RollEntry]:
        return [entry for entry in self.entries if entry.is_boss]

    @property
    def regular_entries(self) -> List[RollEntry]:
        return [entry for entry in self.entries if not entry.is_boss]

    def recompute_percentages(self) -> None:
        for entry in self.entries:
            entry.percentage = (entry.count / self.total_enemies) * 100 if self.total_enemies else 0.0

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class RollPreview:
    """Count range an enemy type can roll at a difficulty, without committing a roll."""

    enemy_type: str
    min_count: int
    max_count: int
    probability: int


@dataclass(slots=True)
class RollStatistics:
    total_active_rolls: int
    rolls_by_difficulty: Dict[str, int]
    oldest_roll: float | None
    newest_roll: float | None
