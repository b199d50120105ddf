import pytest

from idlesim.domain.matchups import (
    ENEMY_TYPES,
    WEAPON_ADVANTAGES,
    WEAPON_RESISTANCES,
    WEAPON_TYPES,
    type_multiplier,
)


def test_every_pair_has_a_known_multiplier() -> None:
    for weapon in WEAPON_TYPES:
        for enemy in ENEMY_TYPES:
            multiplier = type_multiplier(weapon, enemy)
            if WEAPON_ADVANTAGES[weapon] == enemy:
                assert multiplier == 1.5
            elif WEAPON_RESISTANCES[weapon] == enemy:
                assert multiplier == 0.5
            else:
                assert multiplier == 1.0


def test_each_weapon_has_one_advantage_and_one_resistance() -> None:
    for weapon in WEAPON_TYPES:
        multipliers = [type_multiplier(weapon, enemy) for enemy in ENEMY_TYPES]
        assert multipliers.count(1.5) == 1
        assert multipliers.count(0.5) == 1


def test_advantages_cover_every_enemy_but_slimes_once() -> None:
    assert sorted(WEAPON_ADVANTAGES.values()) == sorted(enemy for enemy in ENEMY_TYPES if enemy != "slimes")
    assert sorted(WEAPON_RESISTANCES.values()) == sorted(enemy for enemy in ENEMY_TYPES if enemy != "slimes")


def test_slimes_are_neutral_to_every_weapon() -> None:
    assert {type_multiplier(weapon, "slimes") for weapon in WEAPON_TYPES} == {1.0}


def test_unknown_enemy_is_neutral() -> None:
    assert type_multiplier("spear", "dragons") == 1.0


def test_unknown_weapon_raises() -> None:
    with pytest.raises(KeyError):
        type_multiplier("axe", "slimes")
