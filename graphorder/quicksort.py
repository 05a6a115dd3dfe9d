"""In-place quicksort with a median-of-three pivot and a three-way split."""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")

ISORT = 25
"""Ranges shorter than this are sorted by insertion."""

Less = Callable[[T, T], bool]


def _insertion_sort_range(items: MutableSequence[T], lo: int, hi: int, less: Less) -> None:
    for i in range(lo, hi):
        value = items[i]
        j = i - 1
        while j >= lo and less(value, items[j]):
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value


def insertion_sort(items: MutableSequence[T], less: Less = operator.lt) -> None:
    """Sort ``items`` in place by insertion; equal items keep their order."""
    _insertion_sort_range(items, 0, len(items), less)


def median(a: T, b: T, c: T, less: Less = operator.lt) -> T:
    """Return the middle one of three values."""
    if less(a, b):
        if less(b, c):
            return b
        return c if less(a, c) else a
    if less(a, c):
        return a
    return c if less(b, c) else b


def _quick_sort_range(items: MutableSequence[T], lo: int, hi: int, less: Less) -> None:
    while True:
        n = hi - lo
        if n < ISORT:
            _insertion_sort_range(items, lo, hi, less)
            return
        pivot = median(
            items[lo + n // 4], items[lo + n // 2], items[lo + (3 * n) // 4], less
        )
        left = mid = lo
        right = hi - 1
        while True:
            while not less(pivot, items[mid]):
                if less(items[mid], pivot):
                    items[mid], items[left] = items[left], items[mid]
                    left += 1
                if mid >= right:
                    break
                mid += 1
            while less(pivot, items[right]):
                right -= 1
            if mid >= right:
                break
            items[mid], items[right] = items[right], items[mid]
            right -= 1
            if less(items[mid], pivot):
                items[mid], items[left] = items[left], items[mid]
                left += 1
            mid += 1
        # Recurse on the smaller side and loop on the larger one.
        if left - lo < hi - mid:
            _quick_sort_range(items, lo, left, less)
            lo = mid
        else:
            _quick_sort_range(items, mid, hi, less)
            hi = left


def quick_sort(items: MutableSequence[T], less: Less = operator.lt) -> None:
    """Sort ``items`` in place; items equal to the pivot are left out of recursion."""
    _quick_sort_range(items, 0, len(items), less)