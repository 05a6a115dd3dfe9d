"""Bucketed max-heap over vertex ids with lazy unit key updates."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby

INITIAL_VALUE = 0


@dataclass
class HeadEnd:
    """First and last element of the bucket holding one key."""

    first: int = -1
    second: int = -1


def _trunc_half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


class UnitHeap:
    """Elements live in one doubly linked list sorted by descending key.

    ``header[k]`` marks the first and last element whose key is ``k``.
    ``update[i]`` holds pending changes to element ``i``'s key; negative
    pending changes are applied lazily when the element reaches the top.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("heap size must not be negative")
        self.heapsize = size
        self.keys = [INITIAL_VALUE] * size
        self.prevs = list(range(-1, size - 1))
        self.nexts = list(range(1, size + 1))
        self.update = [-INITIAL_VALUE] * size
        self.header = [HeadEnd() for _ in range(max(size >> 4, INITIAL_VALUE + 4))]
        self.top = 0 if size else -1
        if size:
            self.nexts[-1] = -1
            self.header[INITIAL_VALUE] = HeadEnd(0, size - 1)

    @property
    def is_empty(self) -> bool:
        return self.top < 0

    def _ensure_header(self, key: int) -> None:
        if key >= len(self.header):
            self.header.extend(HeadEnd() for _ in range(key + 1 - len(self.header)))

    def delete_element(self, index: int) -> None:
        """Unlink ``index`` from the list and its bucket."""
        prev, nxt, key = self.prevs[index], self.nexts[index], self.keys[index]
        if prev >= 0:
            self.nexts[prev] = nxt
        if nxt >= 0:
            self.prevs[nxt] = prev

        bucket = self.header[key]
        if bucket.first == bucket.second:
            bucket.first = bucket.second = -1
        elif bucket.first == index:
            bucket.first = nxt
        elif bucket.second == index:
            bucket.second = prev

        if self.top == index:
            self.top = self.nexts[index]
        self.prevs[index] = self.nexts[index] = -1

    def extract_max(self) -> int:
        """Remove and return the element with the largest settled key."""
        if self.top < 0:
            raise IndexError("extract_max from an empty heap")
        while True:
            current = self.top
            if self.update[current] < 0:
                self.decrease_top()
            if self.top == current:
                break
        self.delete_element(current)
        return current

    def decrement_key(self, index: int) -> None:
        self.update[index] -= 1

    def decrease_top(self) -> None:
        """Apply half of the top's pending decrease and sink it if needed."""
        old_top = self.top
        key = self.keys[old_top]
        nxt = self.nexts[old_top]
        if nxt < 0:
            return
        pending = self.update[old_top]
        new_key = key + pending - _trunc_half(pending)
        if new_key >= self.keys[nxt]:
            return

        p = key
        tmp = self.nexts[self.header[p].second]
        while tmp >= 0 and self.keys[tmp] >= new_key:
            p = self.keys[tmp]
            tmp = self.nexts[self.header[p].second]

        self.prevs[nxt] = -1
        tail = self.header[p].second
        tail_next = self.nexts[tail]
        self.prevs[old_top] = tail
        self.nexts[old_top] = tail_next
        self.nexts[tail] = old_top
        if tail_next >= 0:
            self.prevs[tail_next] = old_top
        self.top = nxt

        bucket = self.header[key]
        if bucket.first == bucket.second:
            bucket.first = bucket.second = -1
        else:
            bucket.first = nxt

        self.keys[old_top] = new_key
        self.update[old_top] = _trunc_half(pending)
        target = self.header[new_key]
        target.second = old_top
        if target.first < 0:
            target.first = old_top

    def reconstruct(self) -> None:
        """Rebuild the list and buckets from the current keys."""
        if self.heapsize == 0:
            return
        order = sorted(range(self.heapsize), key=lambda v: -self.keys[v])
        top_key = self.keys[order[0]]
        self.header = [HeadEnd() for _ in range(max(top_key + 1, len(self.header)))]

        for prev, v, nxt in zip([-1] + order[:-1], order, order[1:] + [-1]):
            self.prevs[v] = prev
            self.nexts[v] = nxt

        for key, group in groupby(order, key=self.keys.__getitem__):
            members = list(group)
            self.header[key] = HeadEnd(members[0], members[-1])
        self.top = order[0]

    def increment_key(self, index: int) -> None:
        """Raise the key of ``index`` by one, moving it to the next bucket."""
        key = self.keys[index]
        head = self.header[key].first
        prev = self.prevs[index]
        nxt = self.nexts[index]

        if head != index:
            self.nexts[prev] = nxt
            if nxt >= 0:
                self.prevs[nxt] = prev
            head_prev = self.prevs[head]
            self.prevs[index] = head_prev
            self.nexts[index] = head
            self.prevs[head] = index
            if head_prev >= 0:
                self.nexts[head_prev] = index

        self.keys[index] += 1
        self._ensure_header(key + 1)

        bucket = self.header[key]
        if bucket.first == bucket.second:
            bucket.first = bucket.second = -1
        elif bucket.first == index:
            bucket.first = nxt
        elif bucket.second == index:
            bucket.second = prev

        key += 1
        raised = self.header[key]
        raised.second = index
        if raised.first < 0:
            raised.first = index

        if self.keys[self.top] < key:
            self.top = index

        if key + 4 >= len(self.header):
            self._ensure_header(int(len(self.header) * 1.5) - 1)