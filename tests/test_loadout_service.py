from idlesim.data.repositories import WeaponsRepository
from idlesim.domain.state import ArmorState, HeroState
from idlesim.services.loadout_service import LoadoutService


def _service() -> LoadoutService:
    return LoadoutService(WeaponsRepository())


def test_build_loadout_uses_level_scaled_stats() -> None:
    state = HeroState(hero_level=3, weapon_levels={"spear": 3, "bow": 1}, armor=ArmorState(defense=25, effect="Evasion"))

    loadout = _service().build_loadout(state)

    assert list(loadout.weapons) == ["spear", "bow"]
    assert loadout.weapons["spear"].damage == 19
    assert loadout.weapons["spear"].attack_speed == 1.0
    assert loadout.weapons["bow"].damage == 6
    assert loadout.weapons["bow"].attack_speed == 1.5
    assert loadout.armor is not None
    assert loadout.armor_effect == "Evasion"
    assert loadout.armor.defense == 25


def test_unowned_and_unknown_weapons_are_skipped() -> None:
    state = HeroState(hero_level=1, weapon_levels={"spear": 0, "axe": 4, "wand": 2})

    loadout = _service().build_loadout(state)

    assert list(loadout.weapons) == ["wand"]
    assert loadout.armor is None
    assert loadout.armor_effect == "none"


def test_levels_above_table_are_capped() -> None:
    weapon = _service().build_weapon("crossbow", 14)

    assert weapon is not None
    assert weapon.level == 10
    assert weapon.damage == 115


def test_empty_state_has_no_weapons() -> None:
    assert not _service().build_loadout(HeroState(hero_level=1)).has_weapons


def test_unknown_armor_effect_falls_back_to_none() -> None:
    state = HeroState(hero_level=1, weapon_levels={"spear": 1}, armor=ArmorState(defense=10, effect="Thorns"))

    loadout = _service().build_loadout(state)

    assert loadout.armor is not None
    assert loadout.armor.defense == 10
    assert loadout.armor_effect == "none"
