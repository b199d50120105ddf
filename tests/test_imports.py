def test_import_idlesim_package() -> None:
    import importlib

    module = importlib.import_module("idlesim")
    assert module is not None
    assert module.__version__


def test_import_rng_no_side_effects() -> None:
    from idlesim.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_services_exports() -> None:
    from idlesim.services import AdventureService, BatchSimulator, EnemyRollRegistry

    assert AdventureService is not None
    assert BatchSimulator is not None
    assert EnemyRollRegistry is not None
