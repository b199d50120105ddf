"""Repository exports."""

from .bosses_repo import BossesRepository
from .compositions_repo import CompositionsRepository
from .enemies_repo import EnemiesRepository
from .loot_tables_repo import LootTablesRepository
from .routes_repo import RoutesRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "BossesRepository",
    "CompositionsRepository",
    "EnemiesRepository",
    "LootTablesRepository",
    "RoutesRepository",
    "WeaponsRepository",
]
