"""Service layer exports."""

from .errors import RollRestoreError, UnknownRouteError
from .enemy_roll_registry import EnemyRollRegistry
from .route_service import RouteService
from .wave_service import WaveService
from .boss_service import BossFightResult, BossService
from .loot_service import LootService
from .loadout_service import LoadoutService
from .adventure_service import AdventureService, AdventureSettings
from .batch_service import BatchSimulator, BatchSummary

__all__ = [
    "RollRestoreError",
    "UnknownRouteError",
    "EnemyRollRegistry",
    "RouteService",
    "WaveService",
    "BossFightResult",
    "BossService",
    "LootService",
    "LoadoutService",
    "AdventureService",
    "AdventureSettings",
    "BatchSimulator",
    "BatchSummary",
]
