"""Blocked reduce, scan, pack and filter over sequences.

Long inputs are processed in blocks of ``BLOCK_SIZE`` elements: each block is
combined on its own and the block results are combined afterwards. For an
associative combining function the result equals a plain left-to-right pass.
"""

from __future__ import annotations

import functools
import operator
from itertools import compress
from typing import Callable, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")

LOG_BLOCK_SIZE = 12
BLOCK_SIZE = 1 << LOG_BLOCK_SIZE


def num_blocks(n: int, block_size: int) -> int:
    """Return how many blocks of ``block_size`` are needed to cover ``n`` items."""
    if block_size <= 0:
        raise ValueError("block size must be positive")
    if n < 0:
        raise ValueError("length must not be negative")
    if n == 0:
        return 0
    return 1 + (n - 1) // block_size


def _block_bounds(n: int) -> Iterator[tuple[int, int]]:
    for start in range(0, n, BLOCK_SIZE):
        yield start, min(start + BLOCK_SIZE, n)


def _reduce_serial(values: Sequence[T], f: Callable[[T, T], T]) -> T:
    if not values:
        raise ValueError("reduce of an empty sequence")
    return functools.reduce(f, values[1:], values[0])


def reduce(values: Iterable[T], f: Callable[[T, T], T]) -> T:
    """Combine all values with ``f``; an empty input raises ``ValueError``."""
    items = list(values)
    if num_blocks(len(items), BLOCK_SIZE) <= 1:
        return _reduce_serial(items, f)
    sums = [_reduce_serial(items[s:e], f) for s, e in _block_bounds(len(items))]
    return _reduce_serial(sums, f)


def reduce_add(values: Iterable[T]) -> T | int:
    """Sum the values with ``+``; an empty input sums to 0."""
    items = list(values)
    if not items:
        return 0
    return reduce(items, operator.add)


def _scan_serial(
    values: Sequence[T], f: Callable[[T, T], T], zero: T, inclusive: bool
) -> tuple[list[T], T]:
    running = zero
    out: list[T] = []
    for value in values:
        if inclusive:
            running = f(running, value)
            out.append(running)
        else:
            out.append(running)
            running = f(running, value)
    return out, running


def scan(
    values: Iterable[T],
    f: Callable[[T, T], T],
    zero: T,
    inclusive: bool = False,
) -> tuple[list[T], T]:
    """Return the prefix combinations of ``values`` and the overall total.

    An exclusive scan puts the combination of all earlier values at each
    position, starting from ``zero``; an inclusive scan includes the value
    at the position itself.
    """
    items = list(values)
    n = len(items)
    if num_blocks(n, BLOCK_SIZE) <= 2:
        return _scan_serial(items, f, zero, inclusive)
    bounds = list(_block_bounds(n))
    sums = [_reduce_serial(items[s:e], f) for s, e in bounds]
    starts, total = _scan_serial(sums, f, zero, False)
    out: list[T] = []
    for (s, e), start in zip(bounds, starts):
        part, _ = _scan_serial(items[s:e], f, start, inclusive)
        out.extend(part)
    return out, total


def scan_add(values: Iterable[T], inclusive: bool = False) -> tuple[list[T], T]:
    """Prefix sums of ``values`` starting from 0, and their total."""
    return scan(values, operator.add, 0, inclusive)


def pack(values: Sequence[T], flags: Sequence[object]) -> list[T]:
    """Keep the values whose flag is true, in order."""
    if len(values) != len(flags):
        raise ValueError("values and flags differ in length")
    return list(compress(values, flags))


def pack_index(flags: Iterable[object]) -> list[int]:
    """Return the positions of the true flags."""
    return [i for i, flag in enumerate(flags) if flag]


def filter_values(values: Iterable[T], pred: Callable[[T], object]) -> list[T]:
    """Keep the values satisfying ``pred``, in order."""
    return [value for value in values if pred(value)]