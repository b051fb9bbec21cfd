"""
Seeded deterministic permutation.

Uses the mulberry32 generator with a Fisher-Yates shuffle so that the same
seed yields the same order on every platform.
"""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class Mulberry32:
    """32-bit mulberry32 PRNG."""

    def __init__(self, seed: int):
        self._state = seed & _MASK

    def next_uint32(self) -> int:
        self._state = (self._state + 0x6D2B79F5) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & _MASK) ^ t
        return (t ^ (t >> 14)) & _MASK

    def random(self) -> float:
        return self.next_uint32() / 4294967296


def seeded_permutation(items: Sequence[T], seed: int) -> list[T]:
    result = list(items)
    rng = Mulberry32(seed)
    for i in range(len(result) - 1, 0, -1):
        j = rng.next_uint32() % (i + 1)
        result[i], result[j] = result[j], result[i]
    return result
