import random
from typing import Callable

# A generator returning floats in [0, 1). Every probabilistic rule takes one explicitly.
RandomSource = Callable[[], float]


class LcgRandom:
    """Deterministic random source for replays and tests.

    Mirrors Emerald's RNG: seed = (seed * 1664525 + 1013904223) mod 2^32,
    drawing the upper 16 bits and scaling them into [0, 1).
    """

    def __init__(self, seed: int = 0):
        self.seed = seed & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def rand16(self) -> int:
        """Advance and return the upper 16 bits (0..65535)."""
        self.advance()
        return (self.seed >> 16) & 0xFFFF

    def __call__(self) -> float:
        return self.rand16() / 65536


def system_random() -> RandomSource:
    """Production default, backed by the process RNG."""
    return random.random


def sequence_random(values: list[float]) -> RandomSource:
    """Replay a fixed list of draws, repeating the last one when exhausted."""
    draws = list(values)
    index = 0

    def _next() -> float:
        nonlocal index
        value = draws[min(index, len(draws) - 1)]
        index += 1
        return value

    return _next
