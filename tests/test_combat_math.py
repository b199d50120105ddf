import pytest

from idlesim.domain.combat_math import (
    armor_reduction,
    effective_damage,
    hero_max_hp,
    mitigate,
    resolve_exchange,
    select_weapon,
    time_to_kill,
)
from idlesim.domain.entities import ArmorData, Enemy
from tests.helpers.combat_fixtures import FixedRNG, get_enemy_def, weapon


def _slime() -> Enemy:
    return Enemy.from_def(get_enemy_def("slimes"))


def test_hero_max_hp_scales_with_level() -> None:
    assert hero_max_hp(0) == 100
    assert hero_max_hp(5) == 200


def test_hero_max_hp_rejects_negative_level() -> None:
    with pytest.raises(ValueError):
        hero_max_hp(-1)


def test_spear_against_armored_insects_applies_advantage() -> None:
    spear = weapon("spear", 10, 1.0)

    assert effective_damage(spear, "armored_insects") == 15.0


def test_spear_against_living_plants_applies_resistance() -> None:
    spear = weapon("spear", 10, 1.0)

    assert effective_damage(spear, "living_plants") == 5.0


def test_armor_reduction_is_monotonic_and_saturates() -> None:
    reductions = [armor_reduction(defense) for defense in range(0, 201, 5)]

    assert reductions == sorted(reductions)
    assert armor_reduction(0) == 0.0
    assert armor_reduction(50) == 0.5
    assert armor_reduction(80) == 0.8
    assert armor_reduction(500) == 0.8


def test_mitigate_without_armor_keeps_damage() -> None:
    assert mitigate(12.0, None) == 12.0
    assert mitigate(12.0, ArmorData(defense=0)) == 12.0
    assert mitigate(12.0, ArmorData(defense=50)) == 6.0


def test_time_to_kill_requires_positive_dps() -> None:
    with pytest.raises(ValueError):
        time_to_kill(20, 0)


def test_select_weapon_prefers_advantage_then_neutral() -> None:
    spear = weapon("spear", 10)
    sword = weapon("sword", 10)
    wand = weapon("wand", 10)

    assert select_weapon({"spear": spear, "wand": wand}, "living_plants") is wand
    assert select_weapon({"spear": spear, "sword": sword}, "living_plants") is sword
    assert select_weapon({"spear": spear}, "living_plants") is spear
    assert select_weapon({}, "slimes") is None


def test_resolve_exchange_without_armor() -> None:
    result = resolve_exchange(weapon("spear", 10), _slime(), None, FixedRNG())

    assert result.dps == 10.0
    assert result.time_to_kill == 2.0
    assert result.raw_damage == 6.0
    assert result.hp_lost == 6


def test_resolve_exchange_rounds_partial_damage_up() -> None:
    result = resolve_exchange(weapon("spear", 10), _slime(), ArmorData(defense=40), FixedRNG())

    assert result.mitigated_damage == pytest.approx(3.6)
    assert result.hp_lost == 4


def test_resolve_exchange_speed_bonus_shortens_fight() -> None:
    base = resolve_exchange(weapon("spear", 10), _slime(), None, FixedRNG())
    boosted = resolve_exchange(weapon("spear", 10), _slime(), None, FixedRNG(), speed_bonus=1.2)

    assert boosted.time_to_kill < base.time_to_kill
    assert boosted.raw_damage < base.raw_damage


def test_resolve_exchange_triggers_armor_effect() -> None:
    armor = ArmorData(defense=0, effect="Evasion")

    result = resolve_exchange(weapon("spear", 10), _slime(), armor, FixedRNG(roll=0.0))

    assert result.effect.triggered
    assert result.final_damage == 0.0
    assert result.hp_lost == 0


def test_resolve_exchange_reports_speed_boost() -> None:
    armor = ArmorData(defense=10, effect="Speed Boost")

    result = resolve_exchange(weapon("spear", 10), _slime(), armor, FixedRNG())

    assert result.effect.speed_bonus == 1.2
    assert result.final_damage == result.mitigated_damage
