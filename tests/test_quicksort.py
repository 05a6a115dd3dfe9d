import random
from itertools import permutations

import pytest

from graphorder.quicksort import insertion_sort, median, quick_sort


@pytest.mark.parametrize("n", [0, 1, 2, 24, 25, 26, 100, 5000])
def test_quick_sort_matches_sorted(n):
    rng = random.Random(n)
    items = [rng.randint(-1000, 1000) for _ in range(n)]
    expected = sorted(items)
    quick_sort(items)
    assert items == expected


def test_quick_sort_many_duplicates():
    rng = random.Random(7)
    items = [rng.randint(0, 3) for _ in range(3000)]
    expected = sorted(items)
    quick_sort(items)
    assert items == expected


def test_quick_sort_all_equal_and_presorted():
    same = [4] * 500
    quick_sort(same)
    assert same == [4] * 500
    ascending = list(range(1000))
    quick_sort(ascending)
    assert ascending == list(range(1000))
    descending = list(range(1000, 0, -1))
    quick_sort(descending)
    assert descending == list(range(1, 1001))


def test_quick_sort_custom_order():
    rng = random.Random(3)
    items = [rng.random() for _ in range(400)]
    expected = sorted(items, reverse=True)
    quick_sort(items, lambda a, b: a > b)
    assert items == expected


def test_insertion_sort_is_stable():
    pairs = [(3, "a"), (1, "b"), (3, "c"), (2, "d"), (1, "e")]
    insertion_sort(pairs, lambda x, y: x[0] < y[0])
    assert pairs == sorted(pairs, key=lambda p: p[0])
    assert [p[1] for p in pairs if p[0] == 3] == ["a", "c"]


def test_insertion_sort_plain():
    items = [9, 2, 7, 2, 0]
    insertion_sort(items)
    assert items == sorted([9, 2, 7, 2, 0])


@pytest.mark.parametrize("triple", list(permutations((1, 2, 3))))
def test_median_of_distinct(triple):
    assert median(*triple) == 2


def test_median_with_ties():
    assert median(5, 5, 1) == 5
    assert median(1, 5, 1) == 1