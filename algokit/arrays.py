"""Array utilities: nearest qualifying neighbours, coordinate compression, Cartesian trees."""

from __future__ import annotations

import operator
from bisect import bisect_left
from collections.abc import Callable, Sequence
from typing import Any

Compare = Callable[[Any, Any], bool]


def closest_left(values: Sequence[Any], compare: Compare) -> list[int]:
    """For each i, the largest j < i with ``compare(values[j], values[i])``, else -1."""
    closest: list[int] = []
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and not compare(values[stack[-1]], value):
            stack.pop()
        closest.append(stack[-1] if stack else -1)
        stack.append(i)
    return closest


def closest_right(values: Sequence[Any], compare: Compare) -> list[int]:
    """For each i, the smallest j > i with ``compare(values[j], values[i])``, else ``len(values)``."""
    n = len(values)
    reversed_closest = closest_left(list(reversed(values)), compare)
    return [n - 1 - c for c in reversed(reversed_closest)]


def compress_array(values: Sequence[Any]) -> list[int]:
    """Replace each value with its rank among the distinct values."""
    distinct = sorted(set(values))
    return [bisect_left(distinct, v) for v in values]


def build_cartesian_tree(values: Sequence[Any], compare: Compare = operator.lt) -> list[int]:
    """Return the parent of each index in the Cartesian tree, -1 for the root.

    ``operator.lt`` gives a min-heap and ``operator.gt`` a max-heap. On ties
    the left value becomes the parent of the right one.
    """
    parent = [-1] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        erased = -1
        while stack and compare(value, values[stack[-1]]):
            erased = stack.pop()
        parent[i] = stack[-1] if stack else -1
        if erased >= 0:
            parent[erased] = i
        stack.append(i)
    return parent