import pytest

from idlesim.data.repositories import RoutesRepository
from idlesim.services.errors import UnknownRouteError
from idlesim.services.route_service import RouteService


def _service() -> RouteService:
    return RouteService(RoutesRepository())


def test_parse_target_builds_config() -> None:
    route = _service().parse_target("meadow_path_short")

    assert route is not None
    assert route.id == "meadow_path"
    assert route.length == "Short"
    assert route.wave_count == 3
    assert route.boss == "giant_slime"
    assert route.gold_gain == 25
    assert route.xp_gain == 60
    assert route.target == "meadow_path_short"


def test_parse_target_length_is_case_insensitive() -> None:
    route = _service().parse_target("volcano_core_LONG")

    assert route is not None
    assert route.length == "Long"
    assert route.xp_gain == 80


@pytest.mark.parametrize("target", ["meadow", "meadow_short", "meadow_path_epic", "unknown_route_short", ""])
def test_parse_target_rejects_bad_targets(target: str) -> None:
    assert _service().parse_target(target) is None


def test_get_route_raises_for_unknown_route() -> None:
    with pytest.raises(UnknownRouteError):
        _service().get_route("sunken_city")


def test_available_targets_lists_every_length() -> None:
    targets = _service().available_targets()

    assert len(targets) == 21
    assert "pine_vale_medium" in targets
