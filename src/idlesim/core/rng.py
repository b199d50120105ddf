"""Injectable RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random so every draw in a run can be seeded.

    Passing ``seed=None`` yields an unseeded source, which matches the
    behaviour of ad-hoc simulations that never asked for reproducibility.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self._random.random() < probability

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def weighted_choice(self, seq: Sequence[T_co], weights: Sequence[float]) -> T_co:
        """Return a random element drawn proportionally to ``weights``."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        if len(seq) != len(weights):
            raise ValueError("Sequence and weights must have the same length.")
        if sum(weights) <= 0:
            raise ValueError("Weights must sum to a positive value.")
        return self._random.choices(seq, weights=weights, k=1)[0]

    def spawn(self) -> "RNG":
        """Derive an independent child RNG from this one."""
        return RNG(self._random.randrange(2**32))
