"""Sliding-window minimum or maximum with a monotonic deque."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from typing import Any


class MonotonicRMQ:
    """Minimum (or maximum) over values whose index is at least a moving bound.

    Values are added with non-decreasing indices and queried with
    non-decreasing lower bounds; both are amortised O(1).
    """

    def __init__(self, maximum_mode: bool = False, empty: Any = None) -> None:
        self.maximum_mode = maximum_mode
        if empty is None:
            empty = -math.inf if maximum_mode else math.inf
        self.empty = empty
        self.values: deque[tuple[Any, int]] = deque()
        self.current_index = 0
        self._prev_add_index: int | None = None
        self._prev_query_index: int | None = None

    def __len__(self) -> int:
        return len(self.values)

    def _is_better(self, a: Any, b: Any) -> bool:
        return b < a if self.maximum_mode else a < b

    def add(self, x: Any, index: int | None = None) -> int:
        """Add a value and return its index (the next counter value by default)."""
        if index is None:
            index = self.current_index
            self.current_index += 1
        if self._prev_add_index is not None and index < self._prev_add_index:
            raise ValueError(f"indices must be non-decreasing: {index} after {self._prev_add_index}")
        self._prev_add_index = index

        values = self.values
        while values and not self._is_better(values[-1][0], x):
            values.pop()
        values.append((x, index))
        return index

    def query_index(self, index: int) -> Any:
        """Best value with index at least ``index``, or ``empty`` if there is none."""
        if self._prev_query_index is not None and index < self._prev_query_index:
            raise ValueError(
                f"query indices must be non-decreasing: {index} after {self._prev_query_index}"
            )
        self._prev_query_index = index

        values = self.values
        while values and values[0][1] < index:
            values.popleft()
        return values[0][0] if values else self.empty

    def query_count(self, count: int) -> Any:
        """Best among the last ``count`` values added with automatic indices."""
        return self.query_index(self.current_index - count)

    def has_index(self, index: int) -> bool:
        """Whether a query for ``index`` would find a value."""
        return bool(self.values) and self.values[-1][1] >= index

    def has_count(self, count: int) -> bool:
        return self.has_index(self.current_index - count)


def rmq_every_k(values: Sequence[Any], k: int, maximum_mode: bool = False) -> list[Any]:
    """Minimum (or maximum) of every window of ``k`` consecutive values."""
    n = len(values)
    if not 1 <= k <= n:
        raise ValueError(f"window size must be in [1, {n}], got {k}")
    rmq = MonotonicRMQ(maximum_mode)
    result = []
    for i, value in enumerate(values):
        rmq.add(value)
        if i >= k - 1:
            result.append(rmq.query_count(k))
    return result