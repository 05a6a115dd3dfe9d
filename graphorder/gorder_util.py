"""Small helpers shared by the greedy ordering code."""

from __future__ import annotations

import random
from bisect import bisect_left, bisect_right
from typing import Protocol, Sequence, TypeVar

RAND_MAX = 2**31 - 1
_MASK64 = (1 << 64) - 1

T = TypeVar("T")


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def my_rand64(rng: _RandomSource | None = None) -> int:
    """Build a 64-bit random number from three 31-bit draws."""
    source = rng if rng is not None else random

    def draw() -> int:
        return source.randint(0, RAND_MAX)

    value = draw() << 33
    value |= draw() << 2
    value |= draw() >> 29
    return value & _MASK64


def extract_filename(filename: str) -> str:
    """Return ``filename`` without its last extension."""
    dot = filename.rfind(".")
    if dot < 0:
        return filename
    return filename[:dot]


def vector_preprocessing(values: Sequence[T], u: T) -> list[T]:
    """Sort ``values``, drop duplicates and every occurrence of ``u``.

    Sequences with fewer than two elements are returned unchanged.
    """
    if len(values) < 2:
        return list(values)
    return sorted({value for value in values if value != u})


def intersection_size(v1: Sequence[int], v2: Sequence[int], u: int) -> int:
    """Count common elements of two sorted sequences that are greater than ``u``."""
    i = bisect_right(v1, u)
    if i >= len(v1):
        return 0
    j = bisect_left(v2, v1[i])
    count = 0
    while i < len(v1) and j < len(v2):
        if v1[i] < v2[j]:
            i += 1
        elif v1[i] > v2[j]:
            j += 1
        else:
            count += 1
            i += 1
            j += 1
    return count


def is_intersect(v1: Sequence[T], v2: Sequence[T]) -> bool:
    """Tell whether two sorted sequences share an element."""
    i = j = 0
    while i < len(v1) and j < len(v2):
        if v1[i] == v2[j]:
            return True
        if v1[i] < v2[j]:
            i += 1
        else:
            j += 1
    return False