"""Sparse-table range minimum (or maximum) queries in O(1) after O(n log n) setup."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class SparseTableRMQ:
    """Static range minimum (or maximum, with ``maximum_mode``) over a sequence.

    Queries use half-open ranges ``[a, b)``. When several positions hold the
    best value, the largest index wins.
    """

    def __init__(self, values: Iterable[Any] = (), maximum_mode: bool = False) -> None:
        self.maximum_mode = maximum_mode
        self.values: list[Any] = list(values)
        self.n = len(self.values)
        levels = self.n.bit_length()
        self.range_low: list[list[int]] = [list(range(self.n))] if levels else []

        for k in range(1, levels):
            prev = self.range_low[k - 1]
            half = 1 << (k - 1)
            self.range_low.append(
                [self.better_index(prev[i], prev[i + half]) for i in range(self.n - (1 << k) + 1)]
            )

    def __len__(self) -> int:
        return self.n

    def better_index(self, a: int, b: int) -> int:
        """The index holding the better value; ``b`` on ties."""
        values = self.values
        if self.maximum_mode:
            return a if values[b] < values[a] else b
        return a if values[a] < values[b] else b

    def query_index(self, a: int, b: int) -> int:
        """Index of the best value in ``[a, b)``, choosing the largest index on ties."""
        if not 0 <= a < b <= self.n:
            raise IndexError(f"invalid range [{a}, {b}) for length {self.n}")
        level = (b - a).bit_length() - 1
        row = self.range_low[level]
        return self.better_index(row[a], row[b - (1 << level)])

    def query_value(self, a: int, b: int) -> Any:
        """The best value in ``[a, b)``."""
        return self.values[self.query_index(a, b)]