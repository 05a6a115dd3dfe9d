import random

import pytest

from graphorder.counting_sort import count_sort


def test_small_input_sorted_whole():
    out, counts, blocks = count_sort([3, 1, 2, 1, 0], lambda x: x, 4)
    assert out == [0, 1, 1, 2, 3]
    assert counts == [0, 1, 3, 4]
    assert blocks == 1


def test_small_input_is_stable():
    items = [("b", 1), ("a", 0), ("c", 1), ("d", 0)]
    out, _, _ = count_sort(items, lambda p: p[1], 2)
    assert out == sorted(items, key=lambda p: p[1])


def test_empty_input():
    out, counts, blocks = count_sort([], lambda x: x, 3)
    assert out == []
    assert counts == [0, 0, 0]
    assert blocks == 1


def test_key_out_of_range():
    with pytest.raises(ValueError):
        count_sort([0, 5], lambda x: x, 3)


def test_large_input_sorted_per_block():
    rng = random.Random(7)
    items = [(rng.randrange(10), i) for i in range(2500)]
    out, counts, blocks = count_sort(items, lambda p: p[0], 10)
    assert blocks > 1
    assert blocks & (blocks - 1) == 0
    assert len(counts) == blocks * 10
    assert sorted(out) == sorted(items)

    block_size = (len(items) - 1) // blocks + 1
    for b in range(blocks):
        start, end = b * block_size, min((b + 1) * block_size, len(items))
        part = out[start:end]
        assert part == sorted(items[start:end], key=lambda p: p[0])
        offsets = counts[b * 10 : (b + 1) * 10]
        assert offsets[0] == 0
        assert offsets == sorted(offsets)
        for key, offset in enumerate(offsets):
            if offset < len(part):
                assert part[offset][0] >= key