"""Entropy sources for generic-response selection."""

import random
from typing import Optional


class SeededEntropy:
    """
    Pseudo-random bytes from a private ``random.Random``.

    A fixed seed makes a whole session reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = random.Random(seed)

    def __call__(self) -> int:
        return self._rng.getrandbits(8)

    def __repr__(self) -> str:
        return f"SeededEntropy(seed={self._seed})"


class ConstantEntropy:
    """Always returns the same value. Useful in tests."""

    def __init__(self, value: int = 0):
        self.value = value

    def __call__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantEntropy({self.value})"
