"""Monte Carlo batches of independent adventure runs."""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from idlesim.core.rng import RNG
from idlesim.data.repositories import (
    BossesRepository,
    CompositionsRepository,
    EnemiesRepository,
    LootTablesRepository,
    RoutesRepository,
)
from idlesim.domain.adventure_models import AdventureResult
from idlesim.domain.entities import Loadout
from idlesim.services.adventure_service import AdventureService, AdventureSettings
from idlesim.services.boss_service import BossService
from idlesim.services.enemy_roll_registry import EnemyRollRegistry
from idlesim.services.loot_service import LootService
from idlesim.services.route_service import RouteService
from idlesim.services.wave_service import WaveService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BatchSummary:
    trials: int
    successes: int
    average_final_hp: float
    average_gold: float
    average_xp: float
    loot_counts: Dict[str, int] = field(default_factory=dict)
    results: List[AdventureResult] = field(default_factory=list, repr=False)

    @property
    def success_rate(self) -> float:
        return self.successes / self.trials if self.trials else 0.0


def loot_item_name(entry: str) -> str:
    """Strip the quantity suffix from a rendered drop such as ``"Wood x7"``."""
    name, sep, quantity = entry.rpartition(" x")
    if sep and quantity.isdigit():
        return name
    return entry


class BatchSimulator:
    """Runs trials that share the catalog but never share enemy rolls."""

    def __init__(
        self,
        route_service: RouteService,
        wave_service: WaveService,
        boss_service: BossService,
        loot_service: LootService,
        compositions_repo: CompositionsRepository,
        settings: AdventureSettings = AdventureSettings(),
    ) -> None:
        self._route_service = route_service
        self._wave_service = wave_service
        self._boss_service = boss_service
        self._loot_service = loot_service
        self._compositions_repo = compositions_repo
        self._settings = settings

    @classmethod
    def from_definitions(
        cls,
        base_path: Path | str | None = None,
        settings: AdventureSettings = AdventureSettings(),
    ) -> "BatchSimulator":
        """Wire every service against one definitions directory."""
        enemies_repo = EnemiesRepository(base_path)
        bosses_repo = BossesRepository(base_path)
        routes_repo = RoutesRepository(base_path, bosses_repo=bosses_repo, enemies_repo=enemies_repo)
        return cls(
            route_service=RouteService(routes_repo),
            wave_service=WaveService(routes_repo, enemies_repo),
            boss_service=BossService(bosses_repo),
            loot_service=LootService(LootTablesRepository(base_path)),
            compositions_repo=CompositionsRepository(base_path),
            settings=settings,
        )

    @property
    def route_service(self) -> RouteService:
        return self._route_service

    def adventure_service(self, registry: EnemyRollRegistry) -> AdventureService:
        return AdventureService(
            self._route_service,
            self._wave_service,
            self._boss_service,
            self._loot_service,
            registry,
            self._settings,
        )

    def run_batch(
        self,
        target: str,
        loadout: Loadout,
        hero_level: int,
        trials: int,
        seed: int | None = None,
    ) -> BatchSummary:
        if trials <= 0:
            raise ValueError(f"Trial count must be positive, got {trials}.")
        master = RNG(seed)
        results: List[AdventureResult] = []
        for _ in range(trials):
            trial_rng = master.spawn()
            registry = EnemyRollRegistry(self._compositions_repo, rng=trial_rng.spawn())
            results.append(self.adventure_service(registry).run(target, loadout, hero_level, trial_rng))

        loot_counts: Counter[str] = Counter()
        for result in results:
            loot_counts.update(loot_item_name(entry) for entry in result.loot)
        summary = BatchSummary(
            trials=trials,
            successes=sum(1 for result in results if result.success),
            average_final_hp=sum(result.final_hp for result in results) / trials,
            average_gold=sum(result.total_gold for result in results) / trials,
            average_xp=sum(result.total_xp for result in results) / trials,
            loot_counts=dict(loot_counts),
            results=results,
        )
        logger.info(
            "Batch %s: %d/%d successful (%.1f%%)",
            target,
            summary.successes,
            trials,
            summary.success_rate * 100,
        )
        return summary
