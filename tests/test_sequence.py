import operator
from itertools import accumulate

import pytest

from graphorder.sequence import (
    BLOCK_SIZE,
    filter_values,
    num_blocks,
    pack,
    pack_index,
    reduce,
    reduce_add,
    scan,
    scan_add,
)


@pytest.mark.parametrize("n", [1, 5, BLOCK_SIZE - 1, BLOCK_SIZE, BLOCK_SIZE + 1, 3 * BLOCK_SIZE + 7])
def test_num_blocks_covers_exactly(n):
    blocks = num_blocks(n, BLOCK_SIZE)
    assert (blocks - 1) * BLOCK_SIZE < n <= blocks * BLOCK_SIZE


def test_num_blocks_zero_and_errors():
    assert num_blocks(0, 10) == 0
    with pytest.raises(ValueError):
        num_blocks(5, 0)
    with pytest.raises(ValueError):
        num_blocks(-1, 10)


@pytest.mark.parametrize("n", [1, 10, BLOCK_SIZE * 3 + 11])
def test_reduce_add_matches_sum(n):
    values = list(range(n))
    assert reduce_add(values) == sum(values)


def test_reduce_add_empty_is_zero():
    assert reduce_add([]) == 0


def test_reduce_max_over_blocks():
    values = [(i * 7919) % 10007 for i in range(BLOCK_SIZE * 2 + 3)]
    assert reduce(values, max) == max(values)


def test_reduce_empty_raises():
    with pytest.raises(ValueError):
        reduce([], operator.add)


@pytest.mark.parametrize("n", [0, 7, BLOCK_SIZE * 5 + 3])
def test_scan_add_exclusive(n):
    values = [i % 13 for i in range(n)]
    out, total = scan_add(values)
    assert total == sum(values)
    assert out == [0, *accumulate(values)][:-1] if n else out == []


@pytest.mark.parametrize("n", [9, BLOCK_SIZE * 4 + 1])
def test_scan_add_inclusive(n):
    values = [i % 5 for i in range(n)]
    out, total = scan_add(values, inclusive=True)
    assert out == list(accumulate(values))
    assert total == out[-1]


def test_scan_keeps_order_of_non_commutative_operation():
    chars = [chr(ord("a") + i % 26) for i in range(BLOCK_SIZE * 3 + 5)]
    out, total = scan(chars, operator.add, "", inclusive=True)
    assert total == "".join(chars)
    assert out[-1] == total
    assert out[BLOCK_SIZE] == "".join(chars[: BLOCK_SIZE + 1])


def test_pack_and_pack_index():
    values = list(range(20))
    flags = [v % 3 == 0 for v in values]
    assert pack(values, flags) == [v for v in values if v % 3 == 0]
    assert pack_index(flags) == [i for i, f in enumerate(flags) if f]


def test_pack_length_mismatch():
    with pytest.raises(ValueError):
        pack([1, 2, 3], [True])


def test_filter_values():
    values = list(range(BLOCK_SIZE + 100))
    kept = filter_values(values, lambda v: v % 2 == 1)
    assert kept == values[1::2]