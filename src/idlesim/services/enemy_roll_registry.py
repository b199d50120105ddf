"""Scoped registry of persistent enemy rolls per (route, difficulty).

A roll is created lazily on first request. It stays unchanged until it is
cleared, so repeated "what would happen on this route" queries see the same
enemies. Build one registry per simulation context (batch trial, persona)
to keep independent runs from sharing rolls.
"""
from __future__ import annotations

import logging
import math
import time
from typing import Any, Callable, Dict, List, Mapping, Sequence

from idlesim.core.rng import RNG
from idlesim.core.types import ROUTE_LENGTHS, RollOutcome, RouteLength
from idlesim.data.repositories import CompositionsRepository
from idlesim.domain.defs import CompositionDef
from idlesim.domain.enemy_roll import EnemyRoll, RollEntry, RollPreview, RollStatistics
from idlesim.services.errors import RollRestoreError

logger = logging.getLogger(__name__)

DIFFICULTY_MULTIPLIERS: Dict[str, float] = {"Short": 1.0, "Medium": 1.5, "Long": 2.0}
DEFAULT_ENEMY_COUNTS: Dict[str, int] = {"Short": 3, "Medium": 5, "Long": 8}
DEFAULT_ENEMY_TYPE = "unknown_enemy"
STALE_AFTER_SECONDS = 24 * 60 * 60
MAX_ROLL_SEED = 1_000_000


class EnemyRollRegistry:
    """Generates, caches and clears enemy rolls for one simulation context."""

    def __init__(
        self,
        compositions_repo: CompositionsRepository,
        *,
        rng: RNG | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._compositions_repo = compositions_repo
        self._rng = rng or RNG()
        self._clock = clock
        self._rolls: Dict[str, EnemyRoll] = {}

    @staticmethod
    def roll_key(route_id: str, difficulty: RouteLength) -> str:
        return f"{route_id}:{difficulty}"

    # -----------------------
    # Roll lifecycle
    # -----------------------
    def get_roll(self, route_id: str, difficulty: RouteLength) -> EnemyRoll:
        """Return the persisted roll for the key, generating it on first use."""
        self._require_difficulty(difficulty)
        key = self.roll_key(route_id, difficulty)
        roll = self._rolls.get(key)
        if roll is None:
            roll = self._generate_roll(route_id, difficulty)
            self._rolls[key] = roll
            logger.info("Generated new enemy roll for %s (%s): %d enemies", route_id, difficulty, roll.total_enemies)
        else:
            logger.debug("Using existing enemy roll for %s (%s)", route_id, difficulty)
        return roll

    def has_active_roll(self, route_id: str, difficulty: RouteLength) -> bool:
        return self.roll_key(route_id, difficulty) in self._rolls

    def clear_roll(self, route_id: str, difficulty: RouteLength, outcome: RollOutcome) -> bool:
        """Drop the roll for the key; ``outcome`` is only recorded in the log."""
        removed = self._rolls.pop(self.roll_key(route_id, difficulty), None)
        if removed is not None:
            logger.info("Cleared enemy roll for %s (%s) - outcome: %s", route_id, difficulty, outcome)
        return removed is not None

    def cleanup_stale(self, max_age_seconds: float = STALE_AFTER_SECONDS) -> List[str]:
        cutoff = self._clock() - max_age_seconds
        stale = [key for key, roll in self._rolls.items() if roll.timestamp < cutoff]
        for key in stale:
            del self._rolls[key]
            logger.info("Cleaned up old enemy roll: %s", key)
        return stale

    # -----------------------
    # Introspection
    # -----------------------
    def active_rolls(self) -> Dict[str, EnemyRoll]:
        return dict(self._rolls)

    def preview(self, route_id: str, difficulty: RouteLength) -> List[RollPreview]:
        """Describe possible counts for the key without creating a roll."""
        self._require_difficulty(difficulty)
        composition = self._find_composition(route_id)
        if composition is None:
            return []
        multiplier = DIFFICULTY_MULTIPLIERS[difficulty]
        return [
            RollPreview(
                enemy_type=entry.enemy_type,
                min_count=math.ceil(entry.min_count * multiplier),
                max_count=math.floor(entry.max_count * multiplier),
                probability=entry.weight,
            )
            for entry in composition.entries
        ]

    def statistics(self) -> RollStatistics:
        by_difficulty = {length: 0 for length in ROUTE_LENGTHS}
        for key in self._rolls:
            difficulty = key.rsplit(":", 1)[-1]
            if difficulty in by_difficulty:
                by_difficulty[difficulty] += 1
        timestamps = [roll.timestamp for roll in self._rolls.values()]
        return RollStatistics(
            total_active_rolls=len(self._rolls),
            rolls_by_difficulty=by_difficulty,
            oldest_roll=min(timestamps) if timestamps else None,
            newest_roll=max(timestamps) if timestamps else None,
        )

    # -----------------------
    # Snapshot for the save layer
    # -----------------------
    def export_rolls(self) -> List[Dict[str, Any]]:
        return [{"key": key, "roll": roll.to_payload()} for key, roll in self._rolls.items()]

    def restore_rolls(self, payload: Sequence[Mapping[str, Any]]) -> None:
        """Replace every active roll with the rolls in ``payload``."""
        if not isinstance(payload, (list, tuple)):
            raise RollRestoreError("Enemy roll payload must be a list.")
        restored: Dict[str, EnemyRoll] = {}
        for index, item in enumerate(payload):
            context = f"enemy_rolls[{index}]"
            if not isinstance(item, Mapping):
                raise RollRestoreError(f"{context} must be an object.")
            key = item.get("key")
            if not isinstance(key, str) or ":" not in key:
                raise RollRestoreError(f"{context}.key must be a 'route:difficulty' string.")
            difficulty = key.rsplit(":", 1)[1]
            if difficulty not in DIFFICULTY_MULTIPLIERS:
                raise RollRestoreError(f"{context}.key has unknown difficulty '{difficulty}'.")
            restored[key] = self._coerce_roll(item.get("roll"), f"{context}.roll")
        self._rolls = restored
        logger.info("Restored %d enemy rolls from save data", len(restored))

    # -----------------------
    # Generation
    # -----------------------
    def _generate_roll(self, route_id: str, difficulty: RouteLength) -> EnemyRoll:
        composition = self._find_composition(route_id)
        if composition is None:
            logger.warning("Unknown route: %s, using default composition", route_id)
            return self._generate_default_roll(difficulty)

        multiplier = DIFFICULTY_MULTIPLIERS[difficulty]
        roll = EnemyRoll(timestamp=self._clock(), roll_seed=self._rng.randint(0, MAX_ROLL_SEED - 1))
        for entry in composition.entries:
            adjusted_min = math.ceil(entry.min_count * multiplier)
            adjusted_max = math.floor(entry.max_count * multiplier)
            count = 0
            if adjusted_max > 0:
                count = self._rng.randint(adjusted_min, adjusted_max)
                # Heavier weights lean toward the top of the range.
                if self._rng.chance(entry.weight / 100):
                    count = min(count + 1, adjusted_max)
            if count > 0:
                roll.entries.append(RollEntry(enemy_type=entry.enemy_type, count=count, percentage=0.0))
                roll.total_enemies += count

        if difficulty == "Long" and roll.total_enemies > 0:
            roll.entries.append(RollEntry(enemy_type=composition.boss_id, count=1, percentage=0.0, is_boss=True))
            roll.total_enemies += 1
        roll.recompute_percentages()
        return roll

    def _generate_default_roll(self, difficulty: RouteLength) -> EnemyRoll:
        count = DEFAULT_ENEMY_COUNTS[difficulty]
        return EnemyRoll(
            timestamp=self._clock(),
            entries=[RollEntry(enemy_type=DEFAULT_ENEMY_TYPE, count=count, percentage=100.0)],
            total_enemies=count,
            roll_seed=self._rng.randint(0, MAX_ROLL_SEED - 1),
        )

    def _find_composition(self, route_id: str) -> CompositionDef | None:
        if not self._compositions_repo.has(route_id):
            return None
        return self._compositions_repo.get(route_id)

    @staticmethod
    def _require_difficulty(difficulty: str) -> None:
        if difficulty not in DIFFICULTY_MULTIPLIERS:
            raise ValueError(f"Unknown difficulty '{difficulty}'.")

    @staticmethod
    def _coerce_roll(value: object, context: str) -> EnemyRoll:
        if not isinstance(value, Mapping):
            raise RollRestoreError(f"{context} must be an object.")
        timestamp = value.get("timestamp")
        total = value.get("total_enemies")
        seed = value.get("roll_seed")
        raw_entries = value.get("entries")
        if not isinstance(timestamp, (int, float)) or isinstance(timestamp, bool):
            raise RollRestoreError(f"{context}.timestamp must be a number.")
        if not isinstance(total, int) or not isinstance(seed, int):
            raise RollRestoreError(f"{context} total_enemies and roll_seed must be integers.")
        if not isinstance(raw_entries, list):
            raise RollRestoreError(f"{context}.entries must be a list.")
        entries: List[RollEntry] = []
        for index, raw in enumerate(raw_entries):
            if not isinstance(raw, Mapping):
                raise RollRestoreError(f"{context}.entries[{index}] must be an object.")
            enemy_type = raw.get("enemy_type")
            count = raw.get("count")
            percentage = raw.get("percentage", 0.0)
            if not isinstance(enemy_type, str) or not isinstance(count, int) or count <= 0:
                raise RollRestoreError(f"{context}.entries[{index}] needs an enemy_type and a positive count.")
            if isinstance(percentage, bool) or not isinstance(percentage, (int, float)):
                raise RollRestoreError(f"{context}.entries[{index}].percentage must be a number.")
            entries.append(
                RollEntry(
                    enemy_type=enemy_type,
                    count=count,
                    percentage=float(percentage),
                    is_boss=bool(raw.get("is_boss", False)),
                )
            )
        if sum(entry.count for entry in entries) != total:
            raise RollRestoreError(f"{context}.total_enemies does not match its entries.")
        return EnemyRoll(timestamp=float(timestamp), entries=entries, total_enemies=total, roll_seed=seed)
