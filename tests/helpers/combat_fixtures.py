from __future__ import annotations

from idlesim.core.rng import RNG
from idlesim.data.repositories import (
    BossesRepository,
    CompositionsRepository,
    EnemiesRepository,
    LootTablesRepository,
    RoutesRepository,
    WeaponsRepository,
)
from idlesim.domain.entities import WeaponData

_bosses_repo = BossesRepository()
_enemies_repo = EnemiesRepository()


class FixedRNG(RNG):
    """RNG whose probability rolls always land on ``roll`` and ranges on their minimum."""

    def __init__(self, roll: float = 0.99) -> None:
        super().__init__(0)
        self.roll = roll

    def random(self) -> float:
        return self.roll

    def chance(self, probability: float) -> bool:
        return self.roll < probability

    def randint(self, a: int, b: int) -> int:
        return a


def get_boss_def(boss_id: str):
    return _bosses_repo.get(boss_id)


def get_enemy_def(enemy_id: str):
    return _enemies_repo.get(enemy_id)


def weapon(weapon_type: str, damage: float, attack_speed: float = 1.0) -> WeaponData:
    return WeaponData(type=weapon_type, damage=damage, attack_speed=attack_speed)


def catalog_repos():
    enemies_repo = EnemiesRepository()
    bosses_repo = BossesRepository()
    return {
        "enemies": enemies_repo,
        "bosses": bosses_repo,
        "routes": RoutesRepository(bosses_repo=bosses_repo, enemies_repo=enemies_repo),
        "compositions": CompositionsRepository(),
        "loot_tables": LootTablesRepository(),
        "weapons": WeaponsRepository(),
    }
