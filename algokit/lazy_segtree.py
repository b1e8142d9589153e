"""Segment tree with range add, range assign, range max and range sum."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SegmentChange:
    """A pending update: assign ``to_set`` (when not None), then add ``to_add``."""

    to_add: int = 0
    to_set: int | None = None

    def has_set(self) -> bool:
        return self.to_set is not None

    def has_change(self) -> bool:
        return self.has_set() or self.to_add != 0

    def combine(self, other: SegmentChange) -> SegmentChange:
        """The change equal to applying this one and then ``other``."""
        if other.has_set():
            return other
        return SegmentChange(self.to_add + other.to_add, self.to_set)


@dataclass
class Segment:
    """Aggregate of a range: its maximum and total. ``maximum`` is None when empty."""

    maximum: int | None = None
    total: int = 0

    def empty(self) -> bool:
        return self.maximum is None

    def copy(self) -> Segment:
        return Segment(self.maximum, self.total)

    def apply(self, length: int, change: SegmentChange) -> None:
        """Apply ``change`` to every one of the ``length`` positions covered."""
        if self.maximum is None:
            return
        if change.to_set is not None:
            self.maximum = change.to_set
            self.total = length * change.to_set
        self.maximum += change.to_add
        self.total += length * change.to_add

    def join(self, other: Segment) -> None:
        """Merge ``other`` into this segment."""
        if self.empty():
            self.maximum = other.maximum
            self.total = other.total
        elif not other.empty():
            self.maximum = max(self.maximum, other.maximum)
            self.total += other.total


def _joined(a: Segment, b: Segment) -> Segment:
    result = a.copy()
    result.join(b)
    return result


class LazySegTree:
    """Lazy-propagation segment tree over ``Segment`` values.

    Ranges are half-open ``[a, b)``.
    """

    def __init__(self, n: int = 0) -> None:
        self._init(n)

    def _init(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        tree_n = 1
        while tree_n < n:
            tree_n *= 2
        self.n = n
        self.tree_n = tree_n
        self.tree = [Segment() for _ in range(2 * tree_n)]
        self.changes = [SegmentChange()] * tree_n

    def __len__(self) -> int:
        return self.n

    def build(self, initial: Iterable[Segment]) -> None:
        """Rebuild the tree from a sequence of segments in O(n)."""
        initial = list(initial)
        self._init(len(initial))
        tree, tree_n = self.tree, self.tree_n
        for i, segment in enumerate(initial):
            tree[tree_n + i] = segment.copy()
        for position in range(tree_n - 1, 0, -1):
            tree[position] = _joined(tree[2 * position], tree[2 * position + 1])

    def _check_range(self, a: int, b: int) -> None:
        if not 0 <= a <= b <= self.tree_n:
            raise IndexError(f"invalid range [{a}, {b}) for tree of size {self.tree_n}")

    def _apply_and_combine(self, position: int, length: int, change: SegmentChange) -> None:
        self.tree[position].apply(length, change)
        if position < self.tree_n:
            self.changes[position] = self.changes[position].combine(change)

    def _push_down(self, position: int, length: int) -> None:
        change = self.changes[position]
        if change.has_change():
            self._apply_and_combine(2 * position, length // 2, change)
            self._apply_and_combine(2 * position + 1, length // 2, change)
            self.changes[position] = SegmentChange()

    def _push_all(self, a: int, b: int) -> None:
        a += self.tree_n
        b += self.tree_n - 1
        for up in range(self.tree_n.bit_length() - 1, 0, -1):
            x, y = a >> up, b >> up
            self._push_down(x, 1 << up)
            if x != y:
                self._push_down(y, 1 << up)

    def _join_and_apply(self, position: int, length: int) -> None:
        segment = _joined(self.tree[2 * position], self.tree[2 * position + 1])
        segment.apply(length, self.changes[position])
        self.tree[position] = segment

    def _join_all(self, a: int, b: int) -> None:
        a += self.tree_n
        b += self.tree_n - 1
        length = 1
        while a > 1:
            a //= 2
            b //= 2
            length *= 2
            self._join_and_apply(a, length)
            if a != b:
                self._join_and_apply(b, length)

    def _range_nodes(self, a: int, b: int) -> list[tuple[int, int]]:
        """Canonical nodes covering ``[a, b)``, left to right, with their lengths."""
        left: list[tuple[int, int]] = []
        right: list[tuple[int, int]] = []
        a += self.tree_n
        b += self.tree_n
        length = 1
        while a < b:
            if a & 1:
                left.append((a, length))
                a += 1
            if b & 1:
                b -= 1
                right.append((b, length))
            a //= 2
            b //= 2
            length *= 2
        return left + right[::-1]

    def query(self, a: int, b: int) -> Segment:
        """Aggregate of ``[a, b)``; empty for an empty range."""
        self._check_range(a, b)
        answer = Segment()
        if a == b:
            return answer
        self._push_all(a, b)
        for position, _ in self._range_nodes(a, b):
            answer.join(self.tree[position])
        return answer

    def query_full(self) -> Segment:
        """Aggregate of the whole tree."""
        return self.tree[1].copy()

    def update(self, a: int, b: int, change: SegmentChange) -> None:
        """Apply ``change`` to every position in ``[a, b)``."""
        self._check_range(a, b)
        if a == b:
            return
        self._push_all(a, b)
        for position, length in self._range_nodes(a, b):
            self._apply_and_combine(position, length, change)
        self._join_all(a, b)