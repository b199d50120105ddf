import pytest

from idlesim.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    floats_a = [rng_a.random() for _ in range(5)]
    floats_b = [rng_b.random() for _ in range(5)]
    choices_a = [rng_a.choice(["a", "b", "c"]) for _ in range(5)]
    choices_b = [rng_b.choice(["a", "b", "c"]) for _ in range(5)]

    assert ints_a == ints_b
    assert floats_a == floats_b
    assert choices_a == choices_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_chance_edges() -> None:
    rng = RNG(7)

    assert not any(rng.chance(0.0) for _ in range(50))
    assert all(rng.chance(1.0) for _ in range(50))


def test_weighted_choice_skips_zero_weights() -> None:
    rng = RNG(3)

    picks = {rng.weighted_choice(["a", "b"], [0, 5]) for _ in range(30)}

    assert picks == {"b"}


def test_weighted_choice_rejects_bad_input() -> None:
    rng = RNG(3)

    with pytest.raises(ValueError):
        rng.weighted_choice([], [])
    with pytest.raises(ValueError):
        rng.weighted_choice(["a"], [1, 2])
    with pytest.raises(ValueError):
        rng.weighted_choice(["a", "b"], [0, 0])


def test_spawn_is_reproducible() -> None:
    child_a = RNG(99).spawn()
    child_b = RNG(99).spawn()

    assert [child_a.randint(0, 1000) for _ in range(5)] == [child_b.randint(0, 1000) for _ in range(5)]
