from idlesim.core.rng import RNG
from idlesim.data.repositories import LootTablesRepository
from idlesim.services.loot_service import BONUS_ARMOR_ITEM, LootService
from tests.helpers.combat_fixtures import FixedRNG


def _service() -> LootService:
    return LootService(LootTablesRepository())


def test_every_drop_included_when_rolls_hit() -> None:
    loot = _service().roll("meadow_path", FixedRNG(roll=0.0))

    assert loot == ["Wood x5", "Copper x2", BONUS_ARMOR_ITEM]


def test_nothing_drops_when_rolls_miss() -> None:
    assert _service().roll("meadow_path", FixedRNG(roll=0.99)) == []


def test_bonus_armor_rolls_independently() -> None:
    loot = _service().roll("meadow_path", FixedRNG(roll=0.5))

    assert loot == ["Wood x5", "Copper x2"]


def test_unknown_route_uses_default_table() -> None:
    loot = _service().roll("sunken_city", FixedRNG(roll=0.5))

    assert loot == ["Wood x5"]


def test_quantities_stay_in_range() -> None:
    service = _service()
    rng = RNG(8)

    for _ in range(30):
        for entry in service.roll("dark_forest", rng):
            if entry.startswith("Wood x"):
                assert 40 <= int(entry.split("x")[-1]) <= 60
