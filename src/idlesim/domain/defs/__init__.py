"""Domain definition exports."""

from .boss_def import BossCounterDef, BossDef
from .composition_def import CompositionDef, CompositionEntryDef
from .enemy_def import EnemyDef
from .loot_def import LootDropDef, LootTableDef
from .route_def import RouteConfig, RouteDef
from .weapon_def import WeaponDef

__all__ = [
    "BossCounterDef",
    "BossDef",
    "CompositionDef",
    "CompositionEntryDef",
    "EnemyDef",
    "LootDropDef",
    "LootTableDef",
    "RouteConfig",
    "RouteDef",
    "WeaponDef",
]
