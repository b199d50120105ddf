import json
from pathlib import Path

import pytest

from idlesim.data.errors import DataLoadError, DataReferenceError, DataValidationError
from idlesim.data.repositories import (
    BossesRepository,
    CompositionsRepository,
    EnemiesRepository,
    LootTablesRepository,
    RoutesRepository,
    WeaponsRepository,
)


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _boss_payload(**overrides) -> dict:
    payload = {
        "name": "Test Boss",
        "hp": 100,
        "damage": 5,
        "attack_speed": 1.0,
        "quirk": "Burns",
        "mechanic": "burn",
        "counter": {"description": "Hot", "encourages": "Regeneration armor", "armor_effect": "Regeneration"},
    }
    payload.update(overrides)
    return payload


def test_catalog_definitions_load() -> None:
    enemies_repo = EnemiesRepository()
    bosses_repo = BossesRepository()
    routes_repo = RoutesRepository(bosses_repo=bosses_repo, enemies_repo=enemies_repo)

    assert len(enemies_repo.all()) == 6
    assert len(bosses_repo.all()) == 7
    assert {route.id for route in routes_repo.all()} == {
        "meadow_path",
        "pine_vale",
        "dark_forest",
        "mountain_pass",
        "crystal_caves",
        "frozen_tundra",
        "volcano_core",
    }
    assert CompositionsRepository().has("volcano_core")
    assert LootTablesRepository().has("default")
    assert WeaponsRepository().get("spear").max_level == 10


def test_enemies_repo_loads_stats(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "enemies.json",
        {"slimes": {"name": "Slime", "hp": 20, "damage": 3, "attack_speed": 1.0}},
    )

    enemy = EnemiesRepository(base_path=definitions_dir).get("slimes")

    assert (enemy.hp, enemy.damage, enemy.attack_speed) == (20, 3, 1.0)


def test_missing_definition_file_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)

    with pytest.raises(DataLoadError):
        EnemiesRepository(base_path=definitions_dir).all()


def test_get_missing_id_raises_key_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "enemies.json", {})

    with pytest.raises(KeyError):
        EnemiesRepository(base_path=definitions_dir).get("dragons")


def test_enemy_with_bad_hp_is_rejected(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "enemies.json",
        {"slimes": {"name": "Slime", "hp": 0, "damage": 3, "attack_speed": 1.0}},
    )

    with pytest.raises(DataValidationError):
        EnemiesRepository(base_path=definitions_dir).all()


def test_boss_requires_counter(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    payload = _boss_payload()
    del payload["counter"]
    _write_json(definitions_dir / "bosses.json", {"test_boss": payload})

    with pytest.raises(DataValidationError):
        BossesRepository(base_path=definitions_dir).all()


def test_boss_counter_parses_defaults(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "bosses.json", {"test_boss": _boss_payload()})

    boss = BossesRepository(base_path=definitions_dir).get("test_boss")

    assert boss.counter.armor_effect == "Regeneration"
    assert boss.counter.duration_multiplier == 1.0
    assert boss.weakness is None
    assert (boss.gold_reward, boss.xp_reward) == (50, 20)


def test_route_with_missing_boss_is_rejected(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "bosses.json", {"test_boss": _boss_payload()})
    _write_json(
        definitions_dir / "routes.json",
        {"lane": {"name": "Lane", "boss_id": "ghost", "enemy_types": ["slimes"]}},
    )

    routes_repo = RoutesRepository(
        base_path=definitions_dir,
        bosses_repo=BossesRepository(base_path=definitions_dir),
    )

    with pytest.raises(DataReferenceError):
        routes_repo.all()


def test_route_with_unknown_length_is_rejected(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "routes.json",
        {
            "lane": {
                "name": "Lane",
                "boss_id": "ghost",
                "enemy_types": ["slimes"],
                "wave_counts": {"Endless": 99},
            }
        },
    )

    with pytest.raises(DataValidationError):
        RoutesRepository(base_path=definitions_dir).all()


def test_weapon_requires_damage_levels(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "weapons.json",
        {"spear": {"name": "Spear", "attack_speed": 1.0, "damage_by_level": []}},
    )

    with pytest.raises(DataValidationError):
        WeaponsRepository(base_path=definitions_dir).all()


def test_loot_tables_must_be_a_list(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "loot_tables.json", {"default": []})

    with pytest.raises(DataValidationError):
        LootTablesRepository(base_path=definitions_dir).all()


def test_loot_drop_quantity_defaults_to_one(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "loot_tables.json",
        [{"id": "lane", "drops": [{"item": "Resin", "chance": 0.5}]}],
    )

    drop = LootTablesRepository(base_path=definitions_dir).get("lane").drops[0]

    assert (drop.min_qty, drop.max_qty) == (1, 1)


def test_composition_rejects_inverted_range(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "enemy_compositions.json",
        {"lane": {"boss_id": "ghost", "enemies": [{"enemy_type": "slimes", "weight": 50, "min": 3, "max": 1}]}},
    )

    with pytest.raises(DataValidationError):
        CompositionsRepository(base_path=definitions_dir).all()
