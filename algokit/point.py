"""Integer points in the plane and exact orientation predicates."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable point (or vector) with integer coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, mult: object) -> Point:
        if not isinstance(mult, int):
            return NotImplemented
        return Point(self.x * mult, self.y * mult)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def rotate90(self) -> Point:
        """Rotate a quarter turn counter-clockwise."""
        return Point(-self.y, self.x)

    def norm(self) -> int:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def dist(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.norm())

    def top_half(self) -> bool:
        """True for angles in ``[0, pi)`` measured from the positive x-axis."""
        return self.y > 0 or (self.y == 0 and self.x > 0)


def cross(a: Point, b: Point) -> int:
    return a.x * b.y - b.x * a.y


def dot(a: Point, b: Point) -> int:
    return a.x * b.x + a.y * b.y


def cross_sign(a: Point, b: Point) -> int:
    """Sign of the cross product: +1, 0 or -1."""
    value = cross(a, b)
    return (value > 0) - (value < 0)


def left_turn_strict(a: Point, b: Point, c: Point) -> bool:
    return cross_sign(b - a, c - a) > 0


def left_turn_lenient(a: Point, b: Point, c: Point) -> bool:
    return cross_sign(b - a, c - a) >= 0


def collinear(a: Point, b: Point, c: Point) -> bool:
    return cross_sign(b - a, c - a) == 0


def area_signed_2x(a: Point, b: Point, c: Point) -> int:
    """Twice the signed triangle area; positive when a -> b -> c turns left."""
    return cross(b - a, c - a)


def distance_to_line(p: Point, a: Point, b: Point) -> float:
    """Distance from ``p`` to the line through distinct points ``a`` and ``b``."""
    if a == b:
        raise ValueError("a line needs two distinct points")
    return abs(area_signed_2x(p, a, b)) / (a - b).dist()


def manhattan_dist(a: Point, b: Point) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def infinity_norm_dist(a: Point, b: Point) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y))


def yx_compare(a: Point, b: Point) -> bool:
    """Order by y, then by x."""
    return (a.y, a.x) < (b.y, b.x)


def angle_compare(a: Point, b: Point) -> bool:
    """Order by angle from the positive x-axis, counter-clockwise."""
    if a.top_half() != b.top_half():
        return a.top_half()
    return cross_sign(a, b) > 0