from idlesim.domain.armor_effects import (
    ARMOR_EFFECTS,
    apply_between_waves,
    apply_during_combat,
    apply_on_completion,
    apply_on_kill,
    describe_effect,
    is_known_effect,
)
from tests.helpers.combat_fixtures import FixedRNG


def test_evasion_dodges_when_roll_hits() -> None:
    result = apply_during_combat("Evasion", 10.0, FixedRNG(roll=0.05))

    assert result.triggered
    assert result.apply_to(10.0) == 0.0


def test_evasion_misses_when_roll_fails() -> None:
    result = apply_during_combat("Evasion", 10.0, FixedRNG(roll=0.5))

    assert not result.triggered
    assert result.apply_to(10.0) == 10.0


def test_reflection_reduces_and_reflects() -> None:
    result = apply_during_combat("Reflection", 10.0, FixedRNG(roll=0.1))

    assert result.reflected_damage == 3.0
    assert result.apply_to(10.0) == 7.0


def test_type_resist_names_enemy_type() -> None:
    result = apply_during_combat("Type Resist", 10.0, FixedRNG(roll=0.1), "slimes")

    assert result.damage_reduction == 0.4
    assert "slimes" in result.message


def test_critical_shield_absorbs() -> None:
    result = apply_during_combat("Critical Shield", 8.0, FixedRNG(roll=0.1))

    assert result.apply_to(8.0) == 0.0


def test_speed_boost_needs_damage_taken() -> None:
    hit = apply_during_combat("Speed Boost", 5.0, FixedRNG())
    untouched = apply_during_combat("Speed Boost", 0.0, FixedRNG())

    assert hit.speed_bonus == 1.2
    assert untouched.speed_bonus == 1.0
    assert not untouched.triggered


def test_non_combat_effects_do_nothing_during_combat() -> None:
    for effect in ("none", "Gold Magnet", "Regeneration", "Vampiric"):
        result = apply_during_combat(effect, 10.0, FixedRNG(roll=0.0))
        assert not result.triggered
        assert result.apply_to(10.0) == 10.0


def test_regeneration_heals_between_waves() -> None:
    assert apply_between_waves("Regeneration").heal_amount == 3
    assert apply_between_waves("Evasion").heal_amount == 0


def test_vampiric_caps_per_wave() -> None:
    heals = [apply_on_kill("Vampiric", kills).heal_amount for kills in range(7)]

    assert heals == [1, 1, 1, 1, 1, 0, 0]
    assert apply_on_kill("Reflection", 0).heal_amount == 0


def test_gold_magnet_bonus_is_floored() -> None:
    assert apply_on_completion("Gold Magnet", 101).gold_bonus == 25
    assert apply_on_completion("Gold Magnet", 3).gold_bonus == 0
    assert apply_on_completion("Evasion", 100).gold_bonus == 0


def test_effect_catalog_descriptions() -> None:
    for effect in ARMOR_EFFECTS:
        assert is_known_effect(effect)
        assert describe_effect(effect) != "Unknown effect"
    assert not is_known_effect("Thorns")
    assert describe_effect("Thorns") == "Unknown effect"
