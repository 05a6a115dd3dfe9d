"""Stable counting sort, applied to whole input or to fixed-size blocks."""

from __future__ import annotations

import math
from itertools import accumulate
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

SEQ_THRESHOLD = 2048
MAX_BLOCKS = 512


def _log2_up(value: int) -> int:
    return max(value - 1, 0).bit_length()


def _seq_count_sort(
    items: Sequence[T], keys: Sequence[int], num_buckets: int
) -> tuple[list[T], list[int]]:
    sizes = [0] * num_buckets
    for key in keys:
        sizes[key] += 1
    starts = [0, *accumulate(sizes)][:-1]
    output: list[T] = [None] * len(items)  # type: ignore[list-item]
    cursor = list(starts)
    for item, key in zip(items, keys):
        output[cursor[key]] = item
        cursor[key] += 1
    return output, starts


def count_sort(
    items: Sequence[T], get_key: Callable[[T], int], num_buckets: int
) -> tuple[list[T], list[int], int]:
    """Sort ``items`` stably by ``get_key`` into ``num_buckets`` buckets.

    Small inputs are sorted as a whole. Larger inputs are split into a
    power-of-two number of equal blocks, each sorted on its own. Returns the
    output, the start offset of every bucket within each block (block by
    block, ``num_buckets`` entries each, relative to the block start) and the
    number of blocks.
    """
    if num_buckets < 0:
        raise ValueError("number of buckets must not be negative")
    keys = [get_key(item) for item in items]
    for key in keys:
        if not 0 <= key < num_buckets:
            raise ValueError(f"key {key} outside [0, {num_buckets})")

    n = len(items)
    root = math.ceil(math.sqrt(n))
    blocks = root // 10 if n < 20_000_000 else root
    blocks = 1 << _log2_up(min(blocks, MAX_BLOCKS))

    if n < SEQ_THRESHOLD or blocks == 1:
        output, counts = _seq_count_sort(items, keys, num_buckets)
        return output, counts, 1

    block_size = (n - 1) // blocks + 1
    output: list[T] = []
    counts: list[int] = []
    for i in range(blocks):
        start = min(i * block_size, n)
        end = min(start + block_size, n)
        part, starts = _seq_count_sort(items[start:end], keys[start:end], num_buckets)
        output.extend(part)
        counts.extend(starts)
    return output, counts, blocks