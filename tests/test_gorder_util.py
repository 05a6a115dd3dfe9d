import random

import pytest

from graphorder.gorder_util import (
    RAND_MAX,
    extract_filename,
    intersection_size,
    is_intersect,
    my_rand64,
    vector_preprocessing,
)


class _FixedRandom:
    def __init__(self, values):
        self._values = iter(values)

    def randint(self, a, b):
        return next(self._values)


def test_my_rand64_all_bits_set_from_max_draws():
    assert my_rand64(_FixedRandom([RAND_MAX] * 3)) == (1 << 64) - 1


def test_my_rand64_zero_draws():
    assert my_rand64(_FixedRandom([0, 0, 0])) == 0


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_my_rand64_bit_layout(seed):
    rng = random.Random(seed)
    draws = [rng.randint(0, RAND_MAX) for _ in range(3)]
    value = my_rand64(_FixedRandom(draws))
    assert 0 <= value < 1 << 64
    assert value >> 33 == draws[0]
    assert (value >> 2) & RAND_MAX == draws[1]
    assert value & 3 == draws[2] >> 29


def test_my_rand64_with_real_generator_in_range():
    rng = random.Random(42)
    values = [my_rand64(rng) for _ in range(20)]
    assert all(0 <= v < 1 << 64 for v in values)


@pytest.mark.parametrize(
    "name, expected",
    [("graph.txt", "graph"), ("a.b.c", "a.b"), ("noext", "noext"), ("dir/web.el", "dir/web")],
)
def test_extract_filename(name, expected):
    assert extract_filename(name) == expected


def test_vector_preprocessing_removes_value_and_duplicates():
    values = [3, 1, 3, 2, 5, 2]
    assert vector_preprocessing(values, 3) == [1, 2, 5]
    assert values == [3, 1, 3, 2, 5, 2]


def test_vector_preprocessing_short_input_unchanged():
    assert vector_preprocessing([7], 7) == [7]
    assert vector_preprocessing([], 7) == []


def test_vector_preprocessing_all_removed():
    assert vector_preprocessing([4, 4, 4], 4) == []


def test_intersection_size_counts_common_elements():
    assert intersection_size([1, 3, 5, 7], [3, 4, 5, 7], -1) == 3


def test_intersection_size_respects_lower_bound():
    assert intersection_size([1, 3, 5, 7], [3, 4, 5, 7], 3) == 2


def test_intersection_size_bound_past_end():
    assert intersection_size([1, 3], [1, 3], 10) == 0
    assert intersection_size([], [1, 2], -1) == 0


def test_is_intersect():
    assert is_intersect([1, 4, 9], [2, 4, 6]) is True
    assert is_intersect([1, 3, 5], [2, 4, 6]) is False
    assert is_intersect([], [1]) is False