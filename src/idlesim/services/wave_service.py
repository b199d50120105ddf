"""Wave generation for adventure routes."""
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from idlesim.core.rng import RNG
from idlesim.data.repositories import EnemiesRepository, RoutesRepository
from idlesim.domain.adventure_models import Wave
from idlesim.domain.defs import RouteConfig
from idlesim.domain.enemy_roll import EnemyRoll
from idlesim.domain.entities import Enemy

logger = logging.getLogger(__name__)

MAX_WAVE_SIZE = 5
FALLBACK_ENEMY_TYPES: Tuple[str, ...] = ("slimes",)
FALLBACK_BASE_WAVE_SIZE = 2
FALLBACK_WAVE_COUNT = 3


class WaveService:
    """Turns a route into an ordered list of waves of concrete enemies.

    Enemy stats are copied verbatim from the catalog; route difficulty shows
    up only as more and larger waves.
    """

    def __init__(self, routes_repo: RoutesRepository, enemies_repo: EnemiesRepository) -> None:
        self._routes_repo = routes_repo
        self._enemies_repo = enemies_repo

    def wave_count(self, route: RouteConfig) -> int:
        if self._routes_repo.has(route.id):
            count = self._routes_repo.get(route.id).wave_counts.get(route.length)
            if count:
                return count
        return route.wave_count or FALLBACK_WAVE_COUNT

    def generate(
        self,
        route: RouteConfig,
        rng: RNG,
        roll: EnemyRoll | None = None,
        combat_log: List[str] | None = None,
    ) -> List[Wave]:
        total = self.wave_count(route)
        if combat_log is not None:
            combat_log.append(f"Generating {total} waves for {route.target}")
        enemy_types, weights = self._enemy_pool(route, roll)
        base_size = self._base_wave_size(route)
        waves = [
            Wave(wave_number=number, enemies=self._wave_enemies(number, base_size, enemy_types, weights, rng))
            for number in range(1, total + 1)
        ]
        logger.debug("Generated %d waves for %s", len(waves), route.target)
        return waves

    @staticmethod
    def max_wave_size(wave_number: int, base_wave_size: int) -> int:
        return min(MAX_WAVE_SIZE, base_wave_size + wave_number // 3)

    def _wave_enemies(
        self,
        wave_number: int,
        base_size: int,
        enemy_types: Sequence[str],
        weights: Sequence[float] | None,
        rng: RNG,
    ) -> List[Enemy]:
        size = rng.randint(1, self.max_wave_size(wave_number, base_size))
        enemies: List[Enemy] = []
        for _ in range(size):
            if weights is None:
                enemy_type = rng.choice(enemy_types)
            else:
                enemy_type = rng.weighted_choice(enemy_types, weights)
            enemies.append(Enemy.from_def(self._enemies_repo.get(enemy_type)))
        return enemies

    def _enemy_pool(self, route: RouteConfig, roll: EnemyRoll | None) -> tuple[Tuple[str, ...], List[float] | None]:
        if self._routes_repo.has(route.id):
            allowed = self._routes_repo.get(route.id).enemy_types
        else:
            allowed = FALLBACK_ENEMY_TYPES
        if roll is None:
            return allowed, None
        rolled = [entry for entry in roll.regular_entries if entry.enemy_type in allowed]
        if not rolled:
            return allowed, None
        return tuple(entry.enemy_type for entry in rolled), [float(entry.count) for entry in rolled]

    def _base_wave_size(self, route: RouteConfig) -> int:
        if self._routes_repo.has(route.id):
            return self._routes_repo.get(route.id).base_wave_size
        return FALLBACK_BASE_WAVE_SIZE
